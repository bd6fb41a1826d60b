"""
Smoke test against a running server with real upstream keys configured.
Usage: python scripts/verify_api.py [region]
"""
import httpx
import asyncio
import os
import sys

PORT = os.environ.get("TOPTRACK_PORT", "8099")

async def test_api(region: str):
    url = f"http://127.0.0.1:{PORT}/toptrack"

    print(f"Requesting {url}?region={region} ...")
    try:
        async with httpx.AsyncClient(trust_env=False) as client:
            response = await client.get(url, params={"region": region}, timeout=60.0)
            print(f"Status Code: {response.status_code}")
            if response.status_code == 200:
                data = response.json()
                track = data.get("top_track", {})
                artist_info = data.get("artist_info", {})
                print(f"Top track: {track.get('name')} - {track.get('artist')}")
                print(f"Artist image: {artist_info.get('image_url')}")
                lyrics = data.get("lyrics", "")
                print(f"Lyrics preview: {lyrics[:80]!r}")

                if track.get("name") and lyrics and artist_info.get("image_url"):
                    print("\n✅ Verification SUCCESS: all three sections present.")
                else:
                    print("\n❌ Verification FAILED: Invalid response structure.")
            else:
                print(f"Error Response: {response.text}")
    except Exception as e:
        print(f"Request Failed: {e}")

if __name__ == "__main__":
    asyncio.run(test_api(sys.argv[1] if len(sys.argv) > 1 else "united states"))
