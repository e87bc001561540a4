"""
Adapters Package

External service integrations.

Contents:
=========
- blip_adapter: BLiP HTTP commands client

Usage:
======
    from contacts_api.shared.adapters.blip_adapter import BlipClientFactory

    client = BlipClientFactory().build("Key YmFneTpzMDVU...")
    response = await client.process_command(command)
"""
