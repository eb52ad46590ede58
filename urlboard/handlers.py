import logging
import webbrowser

import flet as ft
import pyperclip

from urlboard.controller import ViewController
from urlboard.models import Tab
from urlboard.normalization import is_valid_url, url_fingerprint
from urlboard.state import RenderModel
from urlboard.ui.dashboard.view import make_result_card, make_stats_screen, make_top_screen
from urlboard.ui_builders import set_active_tab


class Handlers:
    """
    Flet event handlers and the render callback.

    Handlers are coroutines so they run on the page's event loop, the same loop
    the controller schedules its timers and requests on.
    """

    def __init__(  # noqa: PLR0913
        self,
        page: ft.Page,
        logger: logging.Logger,
        controller: ViewController,
        url_input_field: ft.TextField,
        strategy_group: ft.RadioGroup,
        submit_button: ft.ElevatedButton,
        error_text: ft.Text,
        result_slot: ft.Container,
    ):
        self.page = page
        self.logger = logger
        self.controller = controller
        self.url_input_field = url_input_field
        self.strategy_group = strategy_group
        self.submit_button = submit_button
        self.error_text = error_text
        self.result_slot = result_slot

        self.main_body: ft.Container | None = None
        self.shorten_form: ft.Control | None = None
        self.tab_buttons: dict[Tab, ft.ElevatedButton] = {}

    def attach_layout(self, main_body: ft.Container, shorten_form: ft.Control, tab_buttons: dict):
        """Called once while building the UI so `render` can swap the tab content."""
        self.main_body = main_body
        self.shorten_form = shorten_form
        self.tab_buttons = tab_buttons

    # UX-утилиты
    def toast(self, msg: str, ms: int = 1500):
        sb = ft.SnackBar(ft.Text(msg), duration=ms)
        self.page.overlay.append(sb)
        sb.open = True
        self.page.update()

    # Вкладки
    async def on_tab_click(self, e):
        self.controller.select_tab(e.control.data)

    # Поля
    async def on_input_change(self, e):
        self.controller.set_url_input(e.control.value)

    async def on_strategy_change(self, e):
        self.controller.set_strategy(e.control.value)

    async def on_paste(self, _):
        self.logger.info("on_paste fired")
        try:
            pasted = pyperclip.paste()
        except pyperclip.PyperclipException as ex:
            self.logger.warning("paste failed err=%s", ex)
            self.toast("Clipboard is not available.")
            return
        self.controller.set_url_input((pasted or "").strip())

    async def on_clear(self, _):
        if self.controller.state.url_input:
            self.controller.set_url_input("")
        else:
            self.toast("Nothing to clear!", 1000)

    # Главный сценарий: проверка ввода → отправка
    async def on_submit(self, _):
        long_url = (self.url_input_field.value or "").strip()
        self.logger.info("shorten_request url=%s", url_fingerprint(long_url))

        if self.controller.state.submitting:
            self.logger.info("shorten_reject reason=in_flight")
            return
        if not long_url:
            self.toast("Enter the link.")
            self.logger.info("shorten_reject reason=empty_input")
            return
        if not is_valid_url(long_url):
            self.toast("Incorrect URL. Check the link.")
            self.logger.info("shorten_reject reason=invalid_url url=%s", url_fingerprint(long_url))
            return

        self.controller.set_url_input(long_url)
        self.controller.submit()

    # Копирование / открытие
    async def on_copy_result(self, _):
        if self.controller.state.submit_result is None:
            self.toast("Nothing to copy!")
            return
        if not self.controller.copy_short_url():
            self.toast("Copy failed. Details in the logs.")

    async def on_copy_top(self, e):
        entry = e.control.data
        if self.controller.copy_top_link(entry):
            self.toast("Copied to clipboard!")
        else:
            self.toast("Copy failed. Details in the logs.")

    async def on_open_link(self, e):
        url = e.control.data
        if url:
            webbrowser.open(url)

    # Обновление панелей
    async def on_refresh_stats(self, _):
        self.controller.refresh_stats()

    async def on_refresh_top(self, _):
        self.controller.refresh_top()

    async def on_disconnect(self, _):
        self.controller.close()

    # Рендер
    def render(self, model: RenderModel):
        self.url_input_field.value = model.url_input
        self.strategy_group.value = model.collision_strategy.value

        self.submit_button.disabled = model.submitting
        self.submit_button.text = "Shortening..." if model.submitting else "Shorten URL"

        self.error_text.value = model.submit_error or ""
        self.error_text.visible = bool(model.submit_error)

        self.result_slot.content = (
            make_result_card(
                model.submit_result,
                copied=model.copied,
                on_copy=self.on_copy_result,
                on_open=self.on_open_link,
            )
            if model.submit_result is not None
            else None
        )

        if self.tab_buttons:
            set_active_tab(self.tab_buttons, model.active_tab)

        if self.main_body is not None:
            if model.active_tab == Tab.STATS:
                self.main_body.content = make_stats_screen(model.stats, on_refresh=self.on_refresh_stats)
            elif model.active_tab == Tab.TOP:
                self.main_body.content = make_top_screen(
                    model.top,
                    link_for=self.controller.short_link_for,
                    on_copy=self.on_copy_top,
                    on_open=self.on_open_link,
                    on_refresh=self.on_refresh_top,
                )
            else:
                self.main_body.content = self.shorten_form

        self.page.update()
