"""NiceGUI chat screen: intro banner, message bubbles, input and send button."""

from nicegui import events, ui

from talknative.client import ChatController, ChatTransportClient, ViewportTracker
from talknative.config import get_client_config
from talknative.models.schemas import Message, SystemNotice

WELCOME_TEXT = "Welcome to TalkNative!"
INPUT_PLACEHOLDER = "What do you want to say?"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #34c759 0%, #0a84ff 100%); }

    .message-user {
        background: #0a84ff;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-bot {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-system {
        background: #fef2f2;
        color: #b91c1c;
        border: 1px solid #fecaca;
        border-radius: 10px;
    }

    .avatar-bot { background: #6b7280; }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #0a84ff; }

    .send-btn { background: #0a84ff !important; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each browser tab gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        bubble = "message-user" if msg.is_user else "message-bot"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not msg.is_user:
                with ui.element("div").classes(
                    "w-9 h-9 rounded-full flex items-center justify-center avatar-bot"
                ):
                    ui.icon("smart_toy").classes("text-white text-lg")
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    ui.label(msg.text).classes("text-sm leading-relaxed whitespace-pre-wrap")
                ui.label(msg.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if msg.is_user else 'self-start'}"
                )

    def render_notice(notice: SystemNotice) -> None:
        with (
            ui.row().classes("w-full justify-center"),
            ui.row().classes("message-system px-3 py-2 items-center gap-2"),
        ):
            ui.icon("error_outline").classes("text-base")
            ui.label(notice.text).classes("text-xs")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for item in controller.store.timeline:
                if isinstance(item, Message):
                    render_message(item)
                else:
                    render_notice(item)

    def scroll_to_bottom(_item: Message | SystemNotice) -> None:
        controller.viewport.begin_auto_scroll()
        scroll_area.scroll_to(percent=1.0)

    def show_notice(notice: SystemNotice) -> None:
        with messages_container:
            ui.notify(notice.text, type="negative")

    def dismiss_keyboard() -> None:
        input_field.run_method("blur")

    def on_scroll(e: events.ScrollEventArguments) -> None:
        user_scrolled = controller.viewport.update(
            e.vertical_position, e.vertical_size, e.vertical_container_size
        )
        if user_scrolled:
            dismiss_keyboard()

    async def send_message() -> None:
        if controller.submit(input_field.value or "") is not None:
            input_field.value = ""

    controller = ChatController(
        ChatTransportClient(config.api_base_url),
        viewport=ViewportTracker(config.autoscroll_threshold),
        on_change=refresh_messages,
        on_scroll=scroll_to_bottom,
        on_notice=show_notice,
    )

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-2xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with (
            ui.row()
            .classes("w-full header px-5 py-4 items-center gap-3")
            .on("click", dismiss_keyboard)
        ):
            ui.icon("translate").classes("text-white text-3xl")
            ui.label(config.ui_title).classes("text-lg font-semibold text-white")

        # Intro banner, hidden for good once the first message is accepted
        with (
            ui.column()
            .classes("w-full items-center gap-2 py-10")
            .bind_visibility_from(controller.store, "has_started_chat", backward=lambda s: not s)
            .on("click", dismiss_keyboard)
        ):
            ui.icon("forum").classes("text-5xl text-gray-300")
            ui.label(WELCOME_TEXT).classes("text-lg text-gray-500")

        # Messages
        with (
            ui.scroll_area(on_scroll=on_scroll)
            .classes("flex-grow w-full bg-gray-50")
            .on("click", dismiss_keyboard) as scroll_area,
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-1"):
                input_field = (
                    ui.input(placeholder=INPUT_PLACEHOLDER)
                    .props("borderless dense")
                    .classes("w-full")
                    .bind_value(controller.store, "draft_text")
                    .on("keydown.enter", send_message)
                )
            (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated")
                .classes("send-btn")
            )


def main() -> None:
    config = get_client_config()
    ui.run(title=config.ui_title, host=config.host, port=config.ui_port, reload=False)


if __name__ == "__main__":
    main()
