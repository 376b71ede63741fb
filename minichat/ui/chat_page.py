"""NiceGUI chat page driving the /api/chat proxy."""

import os

from nicegui import events, ui

from minichat.models.schemas import Message, Role
from minichat.ui.session import ENTER_KEY_HANDLER, ChatSession, is_submit_key

PAGE_CSS = """
<style>
    body { background: #eef2f3; font-family: system-ui, -apple-system, sans-serif; }

    .chat-shell {
        background: #ffffff;
        border: 1px solid #d8dee0;
        border-radius: 10px;
        overflow: hidden;
    }
    .chat-header { background: #0f766e; }

    .bubble { padding: 0.6rem 0.9rem; border-radius: 14px; max-width: 70%; }
    .bubble-user { background: #0f766e; color: #f0fdfa; border-bottom-right-radius: 3px; }
    .bubble-assistant { background: #e7ecee; color: #1e293b; border-bottom-left-radius: 3px; }

    .typing span {
        display: inline-block;
        width: 6px; height: 6px; margin: 0 2px;
        border-radius: 50%;
        background: #0f766e;
        animation: typing-pulse 1.2s infinite;
    }
    .typing span:nth-child(2) { animation-delay: 0.15s; }
    .typing span:nth-child(3) { animation-delay: 0.3s; }
    @keyframes typing-pulse {
        0%, 100% { opacity: 0.25; }
        50% { opacity: 1; }
    }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(PAGE_CSS)
    session = ChatSession()

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        side = "user" if msg.role == Role.USER else "assistant"
        with ui.row().classes("w-full " + ("justify-end" if side == "user" else "justify-start")):
            ui.label(msg.content).classes(f"bubble bubble-{side} whitespace-pre-wrap break-words")

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            if not session.visible_messages and not session.busy:
                ui.label("Say hello to start chatting.").classes("self-center text-gray-400 mt-16")
            for msg in session.visible_messages:
                render_message(msg)
            if session.busy:
                with ui.element("div").classes("bubble bubble-assistant typing"):
                    for _ in range(3):
                        ui.element("span")

        send_btn.set_enabled(not session.busy)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.busy:
            return

        input_field.value = ""
        await session.send(text, on_change=refresh)

    async def on_enter(e: events.GenericEventArguments) -> None:
        if is_submit_key(e.args):
            await send_message()

    def new_chat() -> None:
        if not session.busy:
            session.reset()
            refresh()

    with ui.column().classes("w-full max-w-3xl mx-auto my-6 gap-0 chat-shell").style(
        "height: calc(100vh - 3rem)"
    ):
        with ui.row().classes("w-full chat-header px-4 py-3 items-center justify-between"):
            ui.label("MiniChat").classes("text-white text-lg font-medium")
            ui.button(icon="refresh", on_click=new_chat).props("flat round dense color=white")

        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full gap-3 p-4")

        with ui.row().classes("w-full p-3 gap-2 items-end border-t no-wrap"):
            input_field = (
                ui.textarea(placeholder="Message (Shift+Enter for a new line)")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown", on_enter, js_handler=ENTER_KEY_HANDLER)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props("unelevated color=teal")

    refresh()


def main() -> None:
    ui.run(
        title="MiniChat",
        port=int(os.getenv("UI_PORT", "8080")),
        reload=False,
    )


if __name__ == "__main__":
    main()
