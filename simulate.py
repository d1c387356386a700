import asyncio
import httpx

from data.sample_tickets import SAMPLE_TICKETS

URL = "http://localhost:8000/analyze"

async def send_ticket(client, i, text):
    resp = await client.post(URL, json={"text": text, "strategy": "heuristic"})
    data = resp.json()
    if resp.status_code != 200:
        print(f"Ticket {i+1:02d} → HTTP {resp.status_code} | {data.get('detail')}")
        return
    print(
        f"Ticket {i+1:02d} → {data['emoji']} {data['severity']:<11} "
        f"{data['panic_label']:>9} | {text[:40]}"
    )

async def main():
    print(f"🚀 Firing {len(SAMPLE_TICKETS)} concurrent tickets...\n")
    async with httpx.AsyncClient(timeout=10) as client:
        tasks = [send_ticket(client, i, t) for i, (t, _) in enumerate(SAMPLE_TICKETS)]
        await asyncio.gather(*tasks)
    print("\n✅ All tickets analyzed!")

if __name__ == "__main__":
    asyncio.run(main())
