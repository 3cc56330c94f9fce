import httpx
import asyncio
import os

PORT = os.environ.get("PORT", "3000")

async def verify_api():
    base = f"http://127.0.0.1:{PORT}"
    checks = [
        ("/lyrics", {"artist": "Beyoncé", "title": "Halo"}),
        ("/movie", {"q": "Fight Club"}),
        ("/trending", {}),
    ]

    async with httpx.AsyncClient(base_url=base, trust_env=False, timeout=30.0) as client:
        for path, params in checks:
            print(f"GET {path} {params}...")
            try:
                response = await client.get(path, params=params)
            except httpx.HTTPError as e:
                print(f"Request Failed: {e}")
                continue

            print(f"Status Code: {response.status_code}")
            if response.status_code == 200:
                data = response.json()
                if path == "/lyrics":
                    print(f"{data['artist']} - {data['title']}")
                    print(data["lyrics"][:300])
                elif path == "/movie":
                    print(f"{data['title']} ({data['releaseDate']})")
                else:
                    print(f"{len(data)} trending movies")
            else:
                print(f"Error Response: {response.text}")
            print()

if __name__ == "__main__":
    asyncio.run(verify_api())
