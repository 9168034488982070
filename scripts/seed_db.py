#!/usr/bin/env python3
"""
Seed a running Songlicense service with a demo owner, songs, a licensee
and a pending license request.

Usage:
    python scripts/seed_db.py --api-url http://localhost:8080/v1/api
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from songlicense.configs import API_URL
from songlicense.core.client import SongLicenseClient
from songlicense.core.exceptions import LicensingAPIError

SONGS = [
    {"title": "Blue in Green", "artist": "Miles Davis", "year": 1959, "genre": "Jazz", "price": 250},
    {"title": "So What", "artist": "Miles Davis", "year": 1959, "genre": "Jazz", "price": 300},
    {"title": "Night Drive", "artist": "Miles Davis", "year": 2020, "genre": "Synthwave", "price": 120},
]


def seed(client: SongLicenseClient, auth_key: str):
    owner = client.create_owner("Demo Records", "rights@demo.example", auth_key)
    print(f"Owner {owner['id']}: {owner['name']}")

    songs = [client.create_song(owner_id=owner["id"], **song) for song in SONGS]
    for song in songs:
        print(f"Song {song['id']}: {song['title']} ({song['year']})")

    licensee = client.create_licensee("Demo Studio", "licensing@studio.example")
    print(f"Licensee {licensee['id']}: {licensee['name']}")

    license = client.create_license_request(
        songs[0]["id"], licensee["id"], "2026-01-01", "2026-12-31")
    print(f"License request {license['id']} for song {license['song_id']}")
    return owner, songs, licensee, license


def main():
    parser = argparse.ArgumentParser(
        description="Seed a running Songlicense service with demo data"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=API_URL,
        help="Base URL of the Songlicense API (e.g., http://localhost:8080/v1/api)"
    )
    parser.add_argument(
        "--auth-key",
        type=str,
        default="demo-key",
        help="Auth key for the demo owner"
    )
    args = parser.parse_args()

    try:
        seed(SongLicenseClient(base_url=args.api_url), args.auth_key)
    except LicensingAPIError as e:
        print(f"Error: {e.kind}: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
