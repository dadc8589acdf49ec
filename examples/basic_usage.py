"""
Basic usage
===========

Walks through the package-level helpers:
- short process-unique IDs, per-namespace auto IDs and UUIDs
- random tokens and password hashing
- encoding and AES-256-CTR encryption of JSON values
- object trimming and iteration

Run:
    python examples/basic_usage.py
"""

import asyncio

import sagus


# ---------------------------------------------------------------------------
# 1. Identifiers
# ---------------------------------------------------------------------------

def show_ids() -> None:
    print("uid:      ", sagus.gen_uid())
    print("order uid:", sagus.gen_uid("order-"))
    print("uuid v1:  ", sagus.gen_uuid())
    print("auto ids: ", [sagus.gen_auto_id("invoice") for _ in range(3)])
    sagus.reset_auto_id("invoice")
    print("after reset:", sagus.gen_auto_id("invoice"))


# ---------------------------------------------------------------------------
# 2. Secrets
# ---------------------------------------------------------------------------

async def show_secrets() -> None:
    key = sagus.gen_random(16)  # 32 hex chars, usable as a 32-byte key
    print("token:    ", sagus.gen_random(16, "base64url"))

    hashed = await sagus.hash_text("correct horse battery staple")
    print("bcrypt:   ", hashed)
    print("verifies: ", await sagus.compare_hash("correct horse battery staple", hashed))

    payload = sagus.encrypt({"card": "4111", "exp": "12/30"}, key)
    print("encrypted:", payload.to_dict())
    print("decrypted:", sagus.decrypt(payload, key))

    encoded = sagus.encode({"page": 2, "size": 50})
    print("cursor:   ", encoded, "->", sagus.decode(encoded))


# ---------------------------------------------------------------------------
# 3. Objects
# ---------------------------------------------------------------------------

def show_objects() -> None:
    form = {"name": "Ada", "email": " ", "age": None, "address": {"city": "London", "zip": ""}}
    print("trimmed:  ", sagus.trim_object(form))
    print("public:   ", sagus.remove_keys(form, ["email"]))
    for key, value in sagus.iterate(["a", "b"]):
        print(f"  {key}: {value}")


async def main():
    show_ids()
    await show_secrets()
    show_objects()


if __name__ == "__main__":
    asyncio.run(main())
