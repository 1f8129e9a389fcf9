import asyncio

from pinata_sdk import PinataClient, PinataError

# Configuration (PINATA_JWT is read from the environment or a .env file)
PINATA_GATEWAY = "example.mypinata.cloud"

# Initialize the client
client = PinataClient(pinata_gateway=PINATA_GATEWAY)


def locate_cid_example():
    """Example of finding the CID inside various URL shapes."""
    inputs = [
        "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
        "ipfs://QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG/metadata.json",
        "https://ipfs.io/ipfs/bafkreih5aznjvttude6c3wbvqeebb6rlx5wkbzyppv7garjiubll2ceym4",
        "https://bafkreih5aznjvttude6c3wbvqeebb6rlx5wkbzyppv7garjiubll2ceym4.ipfs.dweb.link/",
        "https://example.com/no-cid-here",
    ]

    print("CID detection examples:")
    for value in inputs:
        result = client.contains_cid(value)
        print(f"  {value[:50]}... → found={result.found} cid={result.cid}")


def convert_url_example():
    """Example of pointing third-party IPFS links at your own gateway."""
    urls = [
        "ipfs://QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG/image.png",
        "https://cloudflare-ipfs.com/ipfs/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
        "https://dweb.link/ipns/bafkreih5aznjvttude6c3wbvqeebb6rlx5wkbzyppv7garjiubll2ceym4",
    ]

    print("\nGateway conversion examples:")
    for url in urls:
        print(f"  {url}\n    → {client.convert_ipfs_url(url)}")

    # A CID in an unsupported position is reported, not guessed
    try:
        client.convert_ipfs_url(
            "https://example.com/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"
        )
    except PinataError as e:
        print(f"  Conversion failed: {e}")


async def api_example():
    """Example of calling the API (requires PINATA_JWT)."""
    try:
        result = await client.test_authentication()
        print(f"\nAuthentication: {result}")

        signed_url = await client.create_signed_url(
            "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG", expires=60
        )
        print(f"Signed URL: {signed_url}")

        results = await client.delete_files(["not-a-real-file-id"])
        for item in results:
            print(f"Delete {item.id}: {item.status}")
    except PinataError as e:
        print(f"API call failed: {e}")


async def main():
    locate_cid_example()
    convert_url_example()

    async with client:
        await api_example()


if __name__ == "__main__":
    asyncio.run(main())
