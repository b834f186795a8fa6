"""
Seed the resource service with sample MP3 files and check their metadata.

Usage:
    python scripts/seed_db.py ./samples [--resource-url http://localhost:8080] [--song-url http://localhost:8081]
"""

import argparse
import asyncio
import sys
from pathlib import Path

import httpx


async def upload_samples(client: httpx.AsyncClient, sample_dir: Path):
    """Upload every .mp3 in a directory, return (file name, id) pairs"""
    print("\n🎵 Uploading samples...")

    uploaded = []
    for path in sorted(sample_dir.glob("*.mp3")):
        response = await client.post(
            "/resources",
            content=path.read_bytes(),
            headers={"Content-Type": "audio/mpeg"},
        )
        if response.status_code == 200:
            resource_id = response.json()["id"]
            uploaded.append((path.name, resource_id))
            print(f"  ✅ {path.name} -> resource {resource_id}")
        else:
            print(f"  ❌ {path.name}: {response.json().get('errorMessage')}")

    return uploaded


async def verify_metadata(client: httpx.AsyncClient, uploaded):
    """Fetch song metadata for each uploaded resource"""
    print("\n🔍 Verifying metadata...")

    missing = 0
    for name, resource_id in uploaded:
        response = await client.get(f"/songs/{resource_id}")
        if response.status_code == 200:
            song = response.json()
            print(f"  • {resource_id:>5} {song['name']} - {song['artist']} ({song['duration']}, {song['year']})")
        else:
            missing += 1
            print(f"  ⚠️  {resource_id:>5} {name}: no metadata ({response.status_code})")

    return missing


async def main():
    """Main seeding function"""
    parser = argparse.ArgumentParser(description="Upload sample MP3 files")
    parser.add_argument("sample_dir", type=Path)
    parser.add_argument("--resource-url", default="http://localhost:8080")
    parser.add_argument("--song-url", default="http://localhost:8081")
    args = parser.parse_args()

    if not args.sample_dir.is_dir():
        print(f"❌ Not a directory: {args.sample_dir}")
        sys.exit(1)

    print("\n" + "="*70)
    print("🌱 AUDIO STORE - SAMPLE SEEDING")
    print("="*70)

    try:
        async with httpx.AsyncClient(base_url=args.resource_url) as resources:
            uploaded = await upload_samples(resources, args.sample_dir)

        async with httpx.AsyncClient(base_url=args.song_url) as songs:
            missing = await verify_metadata(songs, uploaded)

        print("\n" + "="*70)
        print(f"✅ Uploaded {len(uploaded)} files, {missing} without metadata")
        print("="*70 + "\n")

    except httpx.HTTPError as e:
        print(f"\n❌ Error seeding services: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
