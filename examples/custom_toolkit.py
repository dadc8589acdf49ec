"""
Custom toolkit
==============

Builds a Toolkit with its own defaults instead of the process-wide one:
- a configured secret key, so encrypt/decrypt need no key argument
- a lower bcrypt cost for fast test environments
- an isolated auto ID registry

Run:
    python examples/custom_toolkit.py
"""

import asyncio
import logging

from sagus import (
    CipherConfig,
    Encoding,
    HashConfig,
    RandomConfig,
    ToolkitConfig,
    create_toolkit,
)


async def main():
    logging.basicConfig(level=logging.DEBUG)

    config = ToolkitConfig(
        random=RandomConfig(size=24, encoding=Encoding.BASE64URL),
        hash=HashConfig(cost=4),
        cipher=CipherConfig(secret_key=b"0123456789abcdef0123456789abcdef"),
    )
    toolkit = create_toolkit(config)

    print("session token:", toolkit.gen_random())
    print("ticket ids:   ", [toolkit.gen_auto_id("ticket") for _ in range(3)])

    hashed = await toolkit.hash_text("s3cret")
    print("hash:         ", hashed)

    payload = toolkit.encrypt({"user": 42})
    print("round trip:   ", toolkit.decrypt(payload))


if __name__ == "__main__":
    asyncio.run(main())
