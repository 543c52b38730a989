# Role: Orchestrator for one chat turn. It glues together:
# input capture, the loading placeholder, the single worker call, tiered response checks and error surfacing.

from __future__ import annotations

from typing import Optional

import requests

import beauty_chat.config as config
from beauty_chat.core.context import ChatContext, MessageEntry
from beauty_chat.core.envelope import extract_reply, extract_service_error, parse_body
from beauty_chat.core.renderer import MessageRenderer
from beauty_chat.llm.worker_client import WorkerClient, read_body_text
from beauty_chat.models.message import ASSISTANT, USER, Message, Sender
from beauty_chat.models.payload import ChatPayload
from beauty_chat.models.turn import TurnOutcome, TurnResult
from beauty_chat.prompts.system_prompt import build_system_prompt

LOADING_TEXT = "Thinking..."
PARSE_ERROR_TEXT = "Unexpected response format from the worker. Check browser console for details."
MISSING_REPLY_TEXT = "Sorry, I couldn't get a response."
TRANSPORT_ERROR_TEXT = "Sorry, something went wrong. Please try again later."


class ChatTurnController:
    def __init__(
        self,
        context: Optional[ChatContext] = None,
        worker_client: Optional[WorkerClient] = None,
        renderer: Optional[MessageRenderer] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.context = context or ChatContext()
        self.worker_client = worker_client or WorkerClient()
        self.renderer = renderer or MessageRenderer(self.context.window)

    def submit(self) -> TurnResult:
        # 1) Trim input; ignore empty, refuse while a turn is in flight
        # 2) Render user message, clear + lock input, show placeholder
        # 3) Call the worker once
        # 4) Drop placeholder + unlock input as soon as anything comes back
        # 5) Interpret: HTTP status -> body -> JSON -> error envelope -> reply
        ctx = self.context
        user_text = (ctx.input.value or "").strip()
        if not user_text:
            return TurnResult(outcome=TurnOutcome.IGNORED)

        if ctx.in_flight:
            if config.DEBUG:
                print("SUBMIT IGNORED: a turn is already in flight")
            return TurnResult(outcome=TurnOutcome.BUSY)

        user_message = self._render(USER, user_text)
        ctx.input.value = ""
        ctx.input.disabled = True
        ctx.in_flight = True

        loader = self.renderer.render(ASSISTANT, LOADING_TEXT)

        # Key line: whatever goes wrong below, the user still gets exactly one Assistant message.
        try:
            payload = ChatPayload.for_user_text(build_system_prompt(), user_text)
            response = self.worker_client.send(payload)

            # Key line: placeholder and input are restored before the response is even looked at.
            self._release(loader)
            outcome, text = self._interpret(response)
        except requests.RequestException as e:
            if config.DEBUG:
                print("\n--- WORKER TRANSPORT ERROR ---")
                print("ERROR:", repr(e))
                print("------------------------------\n")
            outcome, text = TurnOutcome.TRANSPORT_ERROR, TRANSPORT_ERROR_TEXT
        except Exception as e:
            if config.DEBUG:
                print("\n--- TURN FAILED ---")
                print("ERROR:", repr(e))
                print("-------------------\n")
            outcome, text = TurnOutcome.INTERNAL_ERROR, TRANSPORT_ERROR_TEXT
        finally:
            self._release(loader)

        return self._finish(outcome, user_message, text)

    def _interpret(self, response: requests.Response) -> tuple[TurnOutcome, str]:
        status = response.status_code
        if not 200 <= status < 300:
            body = read_body_text(response)
            status_text = response.reason or ""
            if config.DEBUG:
                print("\n--- WORKER HTTP ERROR ---")
                print("STATUS:", status, status_text)
                print("BODY:", body)
                print("-------------------------\n")
            return TurnOutcome.HTTP_ERROR, f"Error: {status} {status_text}"

        raw = read_body_text(response)
        if config.DEBUG:
            print("\n--- WORKER RESPONSE ---")
            print("RAW:", raw)
            print("-----------------------\n")

        try:
            data = parse_body(raw)
        except (ValueError, RecursionError) as e:
            if config.DEBUG:
                print("PARSE FAILED:", e)
                print("RAW TEXT:", raw)
            return TurnOutcome.PARSE_ERROR, PARSE_ERROR_TEXT

        service_error = extract_service_error(data)
        if service_error is not None:
            if config.DEBUG:
                print("WORKER ERROR PAYLOAD:", service_error.raw)
            return TurnOutcome.SERVICE_ERROR, f"Error ({service_error.code}): {service_error.message}"

        reply = extract_reply(data)
        if reply is None:
            if config.DEBUG:
                print("MISSING CHOICES IN WORKER RESPONSE:", data)
            return TurnOutcome.MISSING_REPLY, MISSING_REPLY_TEXT

        return TurnOutcome.REPLY, reply

    def _release(self, loader: MessageEntry) -> None:
        # Idempotent: safe to call from every exit path.
        self.context.window.remove(loader)
        self.context.input.disabled = False
        self.context.in_flight = False

    def _finish(self, outcome: TurnOutcome, user_message: Message, text: str) -> TurnResult:
        return TurnResult(
            outcome=outcome,
            user_message=user_message,
            assistant_message=self._render(ASSISTANT, text),
        )

    def _render(self, sender: Sender, text: str) -> Message:
        self.renderer.render(sender, text)
        return Message(sender=sender, text=text)
