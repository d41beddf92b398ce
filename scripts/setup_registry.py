import asyncio
import os

import httpx

from revent.storage.registry_store import EXAMPLE_TENANTS

BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")


async def main():
    print(f"=== Revent Registry Setup ({BASE_URL}) ===\n")

    async with httpx.AsyncClient(base_url=BASE_URL, timeout=30.0) as client:
        print("[1/3] Checking Service Health ... ", end="")
        try:
            resp = await client.get("/health")
            resp.raise_for_status()
            print(f"OK ({resp.json()['version']})")
        except httpx.HTTPError as e:
            print(f"FAILED\n  Error: {e}")
            print("  -> Is the service running? (uvicorn revent.main:app ...)")
            return

        print(f"[2/3] Writing {len(EXAMPLE_TENANTS)} example tenant(s)")
        for tenant, config in EXAMPLE_TENANTS.items():
            print(f"  - {tenant} ... ", end="")
            try:
                resp = await client.put(f"/api/registry/config/{tenant}", json=config)
                resp.raise_for_status()
                print("OK")
            except httpx.HTTPError as e:
                print(f"FAILED\n    Error: {e}")

        print("[3/3] Resolving through /api/config")
        for tenant in EXAMPLE_TENANTS:
            resp = await client.get("/api/config", headers={"X-Tenant": tenant})
            if resp.status_code == 200:
                data = resp.json()
                print(f"  - {tenant}: {data['name']} (chain {data['chainId']}, source={data['configSource']})")
            else:
                print(f"  - {tenant}: {resp.status_code} {resp.json().get('message')}")

    print("\nTry: curl -H 'X-Tenant: ethaccra' " + BASE_URL + "/api/config")


if __name__ == "__main__":
    asyncio.run(main())
