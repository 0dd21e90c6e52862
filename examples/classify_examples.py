"""Example API usage demonstrating all endpoints.

Run the server first:
    python main.py

Then run this script:
    python examples/classify_examples.py
"""

import asyncio

import httpx

SAMPLES = {
    "Patient statement": """
        Patient Statement
        Dr. Smith Family Clinic
        Patient Name: Jane Doe
        Date of Service 2024-03-01
        CPT 99214 Office Visit
        Amount Due $450.32
        """,
    "Explanation of Benefits": """
        Explanation of Benefits
        THIS IS NOT A BILL
        Member ID 123456
        Provider: Valley Medical Center
        Office Visit
        Plan Paid $120.00
        Amount you owe $20.00
        """,
    "Construction estimate": """
        Construction estimate
        Contractor license #88231
        Roofing and plumbing work
        Total: $12,400.00
        """,
    "Lone total": "Total: $50.00",
}


async def main():
    """Run all API examples."""
    base_url = "http://localhost:8000/api/v1"

    async with httpx.AsyncClient() as client:
        print("=" * 80)
        print("Medical Bill Classifier API Examples")
        print("=" * 80)

        print("\n1. Health Check")
        print("-" * 80)
        response = await client.get(f"{base_url}/health")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        print("\n2. Supported Document Types")
        print("-" * 80)
        response = await client.get(f"{base_url}/types")
        for doc_type in response.json()["types"]:
            print(f"  - {doc_type['type']}: {doc_type['description']}")

        for number, (label, text) in enumerate(SAMPLES.items(), start=3):
            print(f"\n{number}. Classify {label}")
            print("-" * 80)
            response = await client.post(f"{base_url}/classify", json={"extracted_text": text})
            data = response.json()["data"]
            print(f"Type: {data['type']} | confidence={data['confidence']}%")
            print(f"Can analyze: {data['can_analyze']}")
            print(f"Message: {data['user_message']}")
            if "_debug" in data:
                print(f"Reasoning: {data['_debug']['reasoning']}")

        print(f"\n{len(SAMPLES) + 3}. Full Matrix for an EOB")
        print("-" * 80)
        response = await client.post(
            f"{base_url}/classify/matrix",
            json={"extracted_text": SAMPLES["Explanation of Benefits"]},
        )
        for line in response.json()["trace"]:
            print(line)

        print(f"\n{len(SAMPLES) + 4}. Missing Text Is Rejected")
        print("-" * 80)
        response = await client.post(f"{base_url}/classify", json={"extracted_text": ""})
        print(f"Status: {response.status_code} | {response.json()}")

        print("\n" + "=" * 80)
        print("All examples completed successfully!")
        print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
