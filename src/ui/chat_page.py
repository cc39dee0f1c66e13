"""NiceGUI chat page wired to the document cache and query pipeline."""

from nicegui import app, events, ui

from src.errors import CacheError
from src.models.schemas import Language, Message, Role, SubmitOutcome
from src.pipeline.service import close_pipeline, get_pipeline

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }
    .message-user { background: #667eea; color: white; border-radius: 18px 18px 4px 18px; }
    .message-assistant { background: #f3f4f6; color: #1f2937; border-radius: 18px 18px 18px 4px; }
    .typing-dot {
        width: 8px; height: 8px; background: #667eea; border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }
    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


app.on_shutdown(close_pipeline)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    pipeline = get_pipeline()
    session = pipeline.session

    files_container: ui.column
    messages_container: ui.column
    input_field: ui.input
    ask_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "items-end" if is_user else "items-start"
        bubble = "message-user" if is_user else "message-assistant"
        with ui.column().classes(f"w-full gap-1 {align}"):
            ui.label("User" if is_user else "Bot").classes("text-xs font-semibold")
            ui.label(msg.content).classes(f"px-4 py-3 max-w-[80%] {bubble}")
            if msg.sources:
                ui.label(f"Sources: {', '.join(msg.sources)}").classes(
                    "text-xs text-gray-500"
                )

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in pipeline.transcript:
                render_message(msg)
            if session.busy:
                with ui.row().classes("message-assistant px-4 py-3 gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_files() -> None:
        files_container.clear()
        with files_container:
            for index, document in enumerate(pipeline.cache.list()):
                with ui.row().classes("w-full items-center justify-between"):
                    ui.label(f"📄 {document.name}").classes("text-sm")
                    ui.button(
                        icon="delete", on_click=lambda _, i=index: remove_file(i)
                    ).props("flat round dense")

    def remove_file(index: int) -> None:
        try:
            pipeline.cache.remove(index)
        except CacheError as e:
            ui.notify(str(e), type="negative")
        refresh_files()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        try:
            pipeline.cache.add_file(e.file.name, data)
        except CacheError as err:
            ui.notify(str(err), type="negative")
        refresh_files()

    async def send_query() -> None:
        if session.busy:
            return
        session.draft_query = input_field.value or ""
        input_field.value = ""
        ask_btn.disable()
        try:
            outcome = await pipeline.submit()
        finally:
            ask_btn.enable()
            refresh_messages()
        if outcome == SubmitOutcome.REJECTED_EMPTY:
            ui.notify("Please type a question or upload a PDF", type="warning")

    def on_language_change(e: events.ValueChangeEventArguments) -> None:
        session.language = Language(e.value)

    def on_message(_: Message) -> None:
        refresh_messages()

    pipeline.transcript.subscribe(on_message)
    ui.context.client.on_disconnect(lambda: pipeline.transcript.unsubscribe(on_message))

    with ui.column().classes("w-full max-w-3xl mx-auto p-6 gap-4"):
        ui.label("RAG Chat Assistant").classes("text-2xl font-bold self-center")

        with ui.row().classes("items-center gap-2"):
            ui.label("Language:").classes("text-sm opacity-70")
            ui.select(
                {language.value: language.label for language in Language},
                value=session.language.value,
                on_change=on_language_change,
            ).props("dense outlined")

        ui.upload(
            label="Drag & drop a PDF here or click to upload",
            on_upload=handle_upload,
            auto_upload=True,
            multiple=True,
        ).classes("w-full")
        files_container = ui.column().classes("w-full gap-1")
        refresh_files()

        with ui.scroll_area().classes("w-full h-96 bg-gray-50 rounded-lg"):
            messages_container = ui.column().classes("w-full gap-4 p-2")
            refresh_messages()

        with ui.row().classes("w-full gap-2 items-center"):
            input_field = (
                ui.input(placeholder="Type your question...")
                .classes("flex-grow")
                .on("keydown.enter", send_query)
            )
            ask_btn = ui.button("Ask", on_click=send_query)


def main() -> None:
    ui.run(title="RAG Chat Assistant", port=8080, reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
