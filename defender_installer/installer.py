#!/usr/bin/env python3
"""Prisma Cloud Defender installer: CLI entrypoint."""

import argparse

from defender_installer.commands.install import register_install_arguments
from defender_installer.logging_setup import setup_cli_logging


def main():
    parser = argparse.ArgumentParser(
        description="Interactive installer for the Prisma Cloud Defender (docker run or cluster manifests)"
    )
    register_install_arguments(parser)

    args = parser.parse_args()
    setup_cli_logging()
    args.func(args)


if __name__ == "__main__":
    main()
