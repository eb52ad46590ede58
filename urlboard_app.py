# 1) Imports
from __future__ import annotations

import asyncio

from urlboard import config
from urlboard.logging_utils import setup_logging

__all__ = ["main"]


# 2) Точка входа (инициализация и «провода»)
async def main(page):
    # локальные импорты — так тестовый monkeypatch перехватывает их корректно
    import flet as ft  # noqa: PLC0415

    import urlboard.ui_builders as U  # noqa: PLC0415
    from urlboard.api_client import ApiClient  # noqa: PLC0415
    from urlboard.controller import ViewController  # noqa: PLC0415
    from urlboard.handlers import Handlers  # noqa: PLC0415
    from urlboard.timers import AsyncioScheduler  # noqa: PLC0415

    logger = setup_logging(
        enabled=config.LOG_ENABLED,
        debug=config.debug_enabled(),
        file_path=config.LOG_FILE,
        max_bytes=config.LOG_MAX_BYTES,
        backups=config.LOG_BACKUPS,
    )
    U.configure_window_and_theme(page)

    api = ApiClient(config.api_base_url(), timeout=config.request_timeout(), logger=logger.getChild("api"))
    scheduler = AsyncioScheduler(asyncio.get_running_loop(), logger=logger)
    controller = ViewController(api, scheduler, logger, copy_fn=page.set_clipboard)
    logger.info("app_start base_url=%s", api.base_url)

    # --- контролы ---
    header_col = U.build_header()
    tab_row, tab_buttons = U.build_tab_bar()
    url_input_field, strategy_group = U.build_inputs()
    button_row, submit_button, clear_button = U.build_buttons()
    error_text = U.build_error_text()
    result_slot = ft.Container()
    footer_col = U.build_footer()

    shorten_form = U.compose_shorten_form(url_input_field, strategy_group, button_row, error_text, result_slot)
    # центральная область: форма ИЛИ статистика ИЛИ топ
    main_body = ft.Container(content=shorten_form)

    handlers = Handlers(
        page=page,
        logger=logger,
        controller=controller,
        url_input_field=url_input_field,
        strategy_group=strategy_group,
        submit_button=submit_button,
        error_text=error_text,
        result_slot=result_slot,
    )
    handlers.attach_layout(main_body, shorten_form, tab_buttons)

    page.add(U.compose_page(header_col, tab_row, main_body, footer_col))

    # бинды
    for btn in tab_buttons.values():
        btn.on_click = handlers.on_tab_click
    url_input_field.on_change = handlers.on_input_change
    url_input_field.on_submit = handlers.on_submit
    url_input_field.suffix.on_click = handlers.on_paste
    strategy_group.on_change = handlers.on_strategy_change
    submit_button.on_click = handlers.on_submit
    clear_button.on_click = handlers.on_clear
    page.on_disconnect = handlers.on_disconnect

    controller.on_change = handlers.render
    handlers.render(controller.render())

    # первичная загрузка статистики и топа — сразу, независимо от вкладки
    controller.activate()


if __name__ == "__main__":  # pragma: no cover
    import flet as ft

    ft.app(target=main)
