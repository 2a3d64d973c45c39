"""
Concurrency test for student creation.

- Fires N concurrent POST /student with the same email against a running server
- Prints the status codes (expect 201 for a single winner, 400 for the others)
"""

from __future__ import annotations

import argparse
import asyncio
import uuid

import httpx


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--base", default="http://localhost:8000")
    p.add_argument("--email", default=None, help="defaults to a random address")
    p.add_argument("--n", type=int, default=5, help="number of concurrent requests")
    return p.parse_args()


async def run():
    args = parse_args()
    email = args.email or f"race-{uuid.uuid4().hex[:8]}@school.example.com"

    payload = {
        "firstName": "Race",
        "lastName": "Condition",
        "email": email,
    }

    async with httpx.AsyncClient(timeout=10) as c:

        async def hit(i: int):
            resp = await c.post(f"{args.base}/student", json=payload)
            text = resp.text[:200]
            return i, resp.status_code, text

        results = await asyncio.gather(*(hit(i) for i in range(args.n)))

    print("payload:", payload)
    for i, code, body in results:
        print(f"req#{i}: {code} {body}")

    created = sum(1 for _, code, _ in results if code == 201)
    rejected = sum(1 for _, code, _ in results if code == 400)
    print(f"created={created} rejected={rejected} other={args.n - created - rejected}")


if __name__ == "__main__":
    asyncio.run(run())
