import flet as ft

from urlboard.config import APP_NAME
from urlboard.models import Tab
from urlboard.ui.dashboard.view import ACCENT, MUTED, STRATEGY_CHOICES

TAB_LABELS = {
    Tab.SHORTEN: "Shorten URL",
    Tab.STATS: "Statistics",
    Tab.TOP: "Top URLs",
}


def configure_window_and_theme(page: ft.Page):
    page.title = APP_NAME
    page.vertical_alignment = ft.MainAxisAlignment.START
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.window.width = 820
    page.window.height = 760
    page.window.min_width = 480
    page.theme_mode = ft.ThemeMode.LIGHT
    page.theme = ft.Theme(color_scheme=ft.ColorScheme(primary=ACCENT))
    page.scroll = ft.ScrollMode.AUTO


def build_header() -> ft.Column:
    return ft.Column(
        controls=[
            ft.Text(APP_NAME, size=36, weight=ft.FontWeight.BOLD, color=ACCENT),
            ft.Text("URL Shortener with Custom DSA Implementations", size=16, color=MUTED),
            ft.Text(
                "Hash Map • LRU Cache • Trie • Min Heap • Base62 • Collision Detection",
                size=12,
                color=MUTED,
            ),
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=4,
    )


def build_tab_bar(*, on_select=None) -> tuple[ft.Row, dict[Tab, ft.ElevatedButton]]:
    """Three mutually exclusive tab buttons; the tab travels in `button.data`."""
    buttons = {tab: ft.ElevatedButton(label, data=tab, on_click=on_select) for tab, label in TAB_LABELS.items()}
    row = ft.Row(controls=list(buttons.values()), alignment=ft.MainAxisAlignment.CENTER, spacing=8)
    return row, buttons


def set_active_tab(buttons: dict[Tab, ft.ElevatedButton], active: Tab):
    for tab, btn in buttons.items():
        selected = tab == active
        btn.bgcolor = ACCENT if selected else None
        btn.color = ft.Colors.WHITE if selected else None


def build_inputs() -> tuple[ft.TextField, ft.RadioGroup]:
    url_input_field = ft.TextField(
        label="Enter URL to Shorten",
        hint_text="https://www.example.com/very/long/url",
        keyboard_type=ft.KeyboardType.URL,
        suffix=ft.IconButton(icon=ft.Icons.CONTENT_PASTE, tooltip="Paste"),
        border_color=ACCENT,
        width=560,
    )
    strategy_group = ft.RadioGroup(
        content=ft.Row(
            controls=[
                ft.Radio(value=value.value, label=f"{label}\n{example}") for value, label, example in STRATEGY_CHOICES
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            wrap=True,
        ),
        value=STRATEGY_CHOICES[0][0].value,
    )
    return url_input_field, strategy_group


def build_buttons() -> tuple[ft.Row, ft.ElevatedButton, ft.ElevatedButton]:
    submit_button = ft.ElevatedButton(
        "Shorten URL",
        color=ft.Colors.WHITE,
        bgcolor=ACCENT,
        height=44,
        width=220,
        style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8)),
    )
    clear_button = ft.OutlinedButton(
        "Clear",
        height=44,
        width=110,
        style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8)),
    )
    row = ft.Row(controls=[submit_button, clear_button], alignment=ft.MainAxisAlignment.CENTER, spacing=16)
    return row, submit_button, clear_button


def build_error_text() -> ft.Text:
    return ft.Text("", color=ft.Colors.RED_400, visible=False)


def build_footer() -> ft.Column:
    return ft.Column(
        controls=[ft.Text(f"{APP_NAME} client", color=ft.Colors.GREY_500, text_align=ft.TextAlign.CENTER)],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
    )


def compose_shorten_form(
    url_input_field: ft.TextField,
    strategy_group: ft.RadioGroup,
    button_row: ft.Row,
    error_text: ft.Text,
    result_slot: ft.Container,
) -> ft.Column:
    return ft.Column(
        controls=[
            url_input_field,
            ft.Text("Collision Resolution Strategy", weight=ft.FontWeight.BOLD),
            strategy_group,
            button_row,
            error_text,
            result_slot,
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=12,
    )


def compose_page(header_col, tab_row, main_body: ft.Container, footer_col) -> ft.Column:
    """Header and tabs on top, the active tab's content in `main_body`."""
    return ft.Column(
        controls=[
            ft.Container(height=16),
            header_col,
            tab_row,
            main_body,
            footer_col,
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=16,
    )
