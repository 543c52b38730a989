# Role: Minimal HTTP wrapper around the worker endpoint. Centralizes URL, headers and timeout,
# so the controller calls a single method: send(payload). No Authorization header: the worker holds the key.

from __future__ import annotations

from typing import Optional

import requests

import beauty_chat.config as config
from beauty_chat.models.payload import ChatPayload


class WorkerClient:
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.url = url or config.WORKER_URL
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT_SECONDS

    def send(self, payload: ChatPayload) -> requests.Response:
        # 1) Serialize payload as JSON
        # 2) POST once (no retries)
        # 3) Hand the response back unread: status checks and body reads belong to the caller
        # Transport failures (DNS, refused, offline, timeout) propagate as requests.RequestException.
        body = payload.to_json()

        if config.DEBUG:
            print("\n--- WORKER REQUEST ---")
            print("URL:", self.url)
            print("PAYLOAD:", body)
            print("----------------------\n")

        return requests.post(
            self.url,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
            stream=True,
        )


def read_body_text(response: requests.Response) -> str:
    # Key line: a body that cannot be read (broken stream, bad encoding) reads as "" instead of raising.
    try:
        return response.text or ""
    except (requests.RequestException, ValueError):
        return ""
    finally:
        response.close()
