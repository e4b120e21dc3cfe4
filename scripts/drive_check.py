#!/usr/bin/env python3
"""
Verify a Google service-account credential by listing the Drive files it can see.

Usage:
    GOOGLE_APPLICATION_CREDENTIALS=/path/to/key.json python scripts/drive_check.py
"""

import json
import os
import sys
from typing import Any, Dict, List

from dotenv import load_dotenv

load_dotenv()

SCOPES = ["https://www.googleapis.com/auth/drive.readonly"]
FIELDS = "files(id, name, mimeType)"


class CredentialsMissing(RuntimeError):
    pass


def list_visible_files(key_path: str, page_size: int = 10) -> List[Dict[str, Any]]:
    """Return the first ``page_size`` Drive files visible to the service account"""
    from google.oauth2 import service_account
    from googleapiclient.discovery import build

    creds = service_account.Credentials.from_service_account_file(key_path, scopes=SCOPES)
    drive = build("drive", "v3", credentials=creds, cache_discovery=False)
    res = drive.files().list(pageSize=page_size, fields=FIELDS).execute()
    return res.get("files") or []


def _describe(err: Exception) -> str:
    # googleapiclient.errors.HttpError carries the API response body
    content = getattr(err, "content", None)
    if content:
        return content.decode("utf-8", "replace") if isinstance(content, bytes) else str(content)
    return str(err) or type(err).__name__


def main() -> int:
    try:
        key_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
        if not key_path:
            raise CredentialsMissing(
                "Set GOOGLE_APPLICATION_CREDENTIALS to the service account JSON path before running."
            )

        files = list_visible_files(key_path)

        print("Drive files visible to the service account:")
        print(json.dumps(files, indent=2))
        return 0
    except Exception as e:
        print("Drive test failed:", file=sys.stderr)
        print(_describe(e), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
