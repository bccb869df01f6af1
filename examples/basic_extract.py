"""Basic example of using govaddress."""

import asyncio

from govaddress import (
    DEFAULT_OVERRIDES,
    AddressExtractor,
    LineEditor,
    StandardizationClient,
    filter_noise,
    normalize_text,
)

# Text nodes as scraped from a member's offices page
page = [
    "Washington, D.C. Office",
    "1022 Longworth House Office Building",
    "Washington, DC 20515",
    "Phone: (202) 225-3701",
    "Syracuse Office",
    "440 South Warren Street",
    "Suite 706",
    "Syracuse, NY 13202",
    "Office Hours: 9:00 AM - 5:00 PM",
]

# Line editing
print("=" * 60)
print("Edited Lines")
print("=" * 60)

lines = normalize_text(filter_noise(page))
lines = DEFAULT_OVERRIDES.apply(("Jane", "Doe"), lines)
lines = LineEditor().edit(lines)
for line in lines:
    print(f"  {line}")

# Extraction
print("\n" + "=" * 60)
print("Extracted Addresses")
print("=" * 60)

addresses = AddressExtractor().extract(lines)
for address in addresses:
    print(f"  {address}")


# Standardization (needs network access to the USPS lookup)
async def standardize_all():
    async with StandardizationClient() as client:
        return await client.standardize_addresses(addresses)


print("\n" + "=" * 60)
print("Standardized Addresses")
print("=" * 60)

for address in asyncio.run(standardize_all()):
    print(f"  {address}")
