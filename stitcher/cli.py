"""
Command line entry point for the CDN key samples.

Usage:
    python -m stitcher create --cdn-key-id my-key --hostname cdn.example.com \
        --key-name my-key --private-key <base64>
    python -m stitcher get --cdn-key-id my-key
    python -m stitcher clean --max-age-seconds 0
"""

import logging
import argparse
from typing import List, Optional

from .cdn_keys import (
    create_cdn_key, create_cdn_key_akamai, delete_cdn_key, get_cdn_key, list_cdn_keys,
)
from .janitor import DELETION_THRESHOLD_SECONDS, clean_stale_cdn_keys
from .utils import retrieve_environment_variables

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Video Stitcher CDN keys")
    parser.add_argument("--project-id", type=str,
                        default=retrieve_environment_variables("GOOGLE_CLOUD_PROJECT"),
                        help="Google Cloud project id (default: $GOOGLE_CLOUD_PROJECT)")
    parser.add_argument("--location", type=str, default="us-central1", help="Region of the CDN keys")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a Cloud CDN or Media CDN key")
    create.add_argument("--cdn-key-id", required=True, help="Id of the new key")
    create.add_argument("--hostname", required=True, help="Hostname served by the CDN")
    create.add_argument("--key-name", required=True, help="Name of the key field")
    create.add_argument("--private-key", required=True, help="Base64-encoded private key")
    create.add_argument("--media-cdn", action="store_true", help="Create a Media CDN key")

    akamai = subparsers.add_parser("create-akamai", help="Create an Akamai CDN key")
    akamai.add_argument("--cdn-key-id", required=True, help="Id of the new key")
    akamai.add_argument("--hostname", required=True, help="Hostname served by the CDN")
    akamai.add_argument("--akamai-token-key", required=True, help="Base64-encoded token key")

    for name, help_text in (("get", "Get a CDN key"), ("delete", "Delete a CDN key")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--cdn-key-id", required=True, help="Id of the key")

    subparsers.add_parser("list", help="List CDN keys in the location")

    clean = subparsers.add_parser("clean", help="Delete stale test CDN keys")
    clean.add_argument("--max-age-seconds", type=int, default=DELETION_THRESHOLD_SECONDS,
                       help="Only delete test keys older than this")
    return parser

def main(argv: Optional[List[str]] = None, client=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.project_id:
        parser.error("--project-id is required when GOOGLE_CLOUD_PROJECT is not set")

    if args.command == "create":
        create_cdn_key(args.project_id, args.location, args.cdn_key_id, args.hostname,
                       args.key_name, args.private_key, is_media_cdn=args.media_cdn, client=client)
    elif args.command == "create-akamai":
        create_cdn_key_akamai(args.project_id, args.location, args.cdn_key_id,
                              args.hostname, args.akamai_token_key, client=client)
    elif args.command == "get":
        get_cdn_key(args.project_id, args.location, args.cdn_key_id, client=client)
    elif args.command == "delete":
        delete_cdn_key(args.project_id, args.location, args.cdn_key_id, client=client)
    elif args.command == "list":
        list_cdn_keys(args.project_id, args.location, client=client)
    elif args.command == "clean":
        deleted = clean_stale_cdn_keys(args.project_id, args.location, client=client,
                                       max_age_seconds=args.max_age_seconds)
        print(f"Deleted {len(deleted)} stale CDN key(s)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
