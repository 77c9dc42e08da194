#!/usr/bin/env python3
"""Prisma Cloud Defender installer: CLI entrypoint."""

from defender_installer.installer import main

if __name__ == "__main__":
    main()
