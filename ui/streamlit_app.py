# Role: Streamlit host for the chat widget.
# - The controller is authoritative (it owns messages, placeholder and input lock).
# - This file only feeds submissions in and redraws the message list whenever it changes.

from __future__ import annotations

import html

import streamlit as st

import beauty_chat.config
beauty_chat.config.load_env()

from beauty_chat.core.context import ChatContext, ChatWindow
from beauty_chat.core.turn_controller import ChatTurnController


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "chat_context" not in st.session_state:
        st.session_state["chat_context"] = ChatContext()
    if "controller" not in st.session_state:
        st.session_state["controller"] = ChatTurnController(context=st.session_state["chat_context"])


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 820px; padding-top: 2rem; padding-bottom: 2rem; }

/* Message list */
.chat-window {
  border: 1px solid rgba(49, 51, 63, 0.14);
  border-radius: 16px;
  padding: 14px 14px;
  max-height: 60vh;
  overflow-y: auto;
}

.chat-greeting { opacity: 0.8; margin-bottom: 10px; }

.message {
  padding: 10px 12px;
  border-radius: 14px;
  margin-bottom: 10px;
  line-height: 1.35;
}

.message.user { background: rgba(0, 0, 0, 0.04); margin-left: 15%; }
.message.assistant { background: rgba(199, 161, 84, 0.12); margin-right: 15%; }

div[data-testid="stChatInput"] textarea { min-height: 44px; }
</style>
""",
        unsafe_allow_html=True,
    )


# ----------------------------
# Chat
# ----------------------------
def window_html(window: ChatWindow) -> str:
    # Key line: entry.html is escaped by the renderer; only the wrapper markup is ours.
    rows = "".join(f'<div class="{html.escape(entry.css_class)}">{entry.html}</div>' for entry in window.entries)
    greeting = html.escape(window.greeting, quote=False)
    return f'<div class="chat-window"><div class="chat-greeting">{greeting}</div>{rows}</div>'


def bind_window(window: ChatWindow) -> None:
    # Redraw into a single slot on every change so "Thinking..." shows while the request runs.
    slot = st.empty()

    def redraw(w: ChatWindow) -> None:
        slot.markdown(window_html(w), unsafe_allow_html=True)

    window.listener = redraw
    redraw(window)


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="L'Oréal Beauty Assistant", page_icon="💄", layout="centered")
    inject_css()

    st.title("💄 L'Oréal Beauty Assistant")
    st.caption("Ask about L'Oréal products, skincare and haircare routines, or recommendations.")

    ensure_session()
    ctx: ChatContext = st.session_state["chat_context"]
    controller: ChatTurnController = st.session_state["controller"]

    bind_window(ctx.window)

    # Key line: submit() is synchronous, so the input is already unlocked by the time this is drawn.
    user_input = st.chat_input("Ask me about products or routines…")
    if not user_input:
        return

    ctx.input.value = user_input
    controller.submit()


if __name__ == "__main__":
    main()
