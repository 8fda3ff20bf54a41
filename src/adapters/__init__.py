"""Adapters: everything that talks to the outside world.

- `ffmpeg_converter`: the external conversion tool (subprocess).
- `http_client` / `public_ip`: the public IP endpoint (httpx).
"""
