#!/usr/bin/env python3
"""
Gandalf Python client - repository workflow example

This example walks through a typical provisioning flow:
1. Check the server is up
2. Create a user with a public key
3. Create a repository and grant access to a second user
4. Read the repository metadata and its log
5. Clean up

Run with: GANDALF_ENDPOINT=http://localhost:8000 python examples/repository_workflow.py
"""

import logging
import random
import string
import sys

from gandalf import GandalfClient, configure_logging
from gandalf.exceptions import ConfigurationError, GandalfError, HTTPError

PUBLIC_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIGPkeHl3b1Bz1Sx3QdTj0nPyyqN0m3rJQ4tC example@laptop"


def generate_random_suffix(length: int = 6) -> str:
    """Generate a random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def main() -> None:
    """Run the repository workflow example."""
    print("=== Gandalf Python Client Example ===\n")

    if "-v" in sys.argv:
        configure_logging(level=logging.DEBUG)

    try:
        client = GandalfClient.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    owner = f"example-owner-{generate_random_suffix()}"
    reader = f"example-reader-{generate_random_suffix()}"
    repo_name = f"example-project-{generate_random_suffix()}"

    with client:
        print("1. Checking server health...")
        print(f"   {client.healthcheck()}")

        print("\n2. Creating users...")
        client.users.create(owner, {"laptop": PUBLIC_KEY})
        client.users.create(reader)
        print(f"   Created {owner} and {reader}")

        try:
            print("\n3. Creating repository...")
            client.repositories.create(repo_name, users=[owner])
            try:
                client.access.grant([repo_name], [reader])
                print(f"   Created {repo_name}, {reader} granted access")

                print("\n4. Reading repository metadata...")
                repo = client.repositories.get(repo_name)
                print(f"   SSH URL: {repo.ssh_url}")
                print(f"   Git URL: {repo.git_url}")
                print(f"   Keys of {owner}: {list(client.keys.list(owner))}")

                try:
                    log = client.repositories.get_log(repo_name, "master", total=5)
                    print(f"   {len(log.commits)} commits on master")
                except HTTPError as e:
                    # A fresh repository has no master branch yet
                    print(f"   No log yet ({e.code}): {e.reason.strip()}")
            finally:
                print("\n5. Cleaning up...")
                client.repositories.remove(repo_name)
        finally:
            client.users.remove(reader)
            client.users.remove(owner)

    print("\n=== Example Complete ===")


if __name__ == "__main__":
    try:
        main()
    except GandalfError as e:
        print(f"\nGandalf error: {e}")
        sys.exit(1)
