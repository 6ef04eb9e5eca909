#!/usr/bin/env python3
"""
Basic usage examples for the Flickr API client library.

This script demonstrates signing, auth URL generation and calling the
Flickr REST API. Set FLICKR_API_KEY (and optionally FLICKR_API_SECRET)
before running it.
"""

import os
import sys

import requests

from flickr_api import FlickrClient, FlickrAPIError, MethodFailedError


def main(api_key, api_secret):
    """Run basic usage examples."""

    print("=== Flickr API Client Basic Usage Examples ===\n")

    # Create client
    print("1. Creating Flickr client...")
    client = FlickrClient(api_key, api_secret)
    print(f"   REST endpoint: {client.config['rest_uri']}")
    print(f"   API key: {api_key[:8]}...")
    print(f"   Signing: {'enabled' if client.credentials.has_secret else 'disabled'}\n")

    try:
        # Example 1: Signing
        if client.credentials.has_secret:
            print("2. Signing an argument set...")
            args = {'foo': 'bar', 'tags': '東京'}
            print(f"   Args: {args}")
            print(f"   api_sig: {client.sign_args(args)}")
        else:
            print("2. Skipping signing (no secret configured)")
        print()

        # Example 2: Auth URL
        print("3. Building an auth URL...")
        url = client.request_auth_url('read')
        if url:
            print(f"   ✓ Send the user to: {url}")
        else:
            print("   ✗ No auth URL without a secret")
        print()

        # Example 3: A successful call
        print("4. Calling flickr.test.echo...")
        response = client.execute_method('flickr.test.echo', {'foo': 'bar'})
        if response.success:
            print(f"   ✓ Echoed foo={response.find('foo').text}")
        else:
            print(f"   ✗ Call failed: {response.error_message or response.protocol_error}")
        print()

        # Example 4: A failing call
        print("5. Calling a method that does not exist...")
        response = client.execute_method('fake.method')
        try:
            response.raise_for_error()
        except MethodFailedError as e:
            print(f"   ✓ Service rejected it with error {e.code}: {e.message}")
        print()

        print("=== All Examples Completed Successfully! ===")

    except requests.RequestException as e:
        print(f"Could not reach the Flickr API: {e}")
        sys.exit(1)
    except FlickrAPIError as e:
        print(f"Flickr API Error: {e}")
        sys.exit(1)
    finally:
        # Clean up
        client.close()


def demonstrate_configuration(api_key):
    """Demonstrate client configuration options."""

    print("\n=== Configuration Options Example ===")

    with FlickrClient(
        api_key,
        rest_uri="https://api.flickr.com/services/rest/",
        timeout=60,                 # 60 second HTTP timeout
        compression_enabled=False   # ask for uncompressed bodies
    ) as client:
        print("✓ Client configured with:")
        print(f"  - REST endpoint: {client.config['rest_uri']}")
        print(f"  - HTTP timeout: {client.config['timeout']} seconds")
        print(f"  - Compression: {client.config['compression_enabled']}")


if __name__ == "__main__":
    key = os.environ.get("FLICKR_API_KEY")
    if not key:
        print("FLICKR_API_KEY is not set. Export your API key first:")
        print("> export FLICKR_API_KEY=...")
        sys.exit(1)

    main(key, os.environ.get("FLICKR_API_SECRET"))
    demonstrate_configuration(key)
