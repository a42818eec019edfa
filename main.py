"""
main.py — Demo

1. Load tuning constants
2. Create the host (scheduler + modal stack)
3. Build a settings menu and an about menu
4. Run until the last menu closes
"""

from core import tuning
from core.app import App
from menu import (
    CloseButton, CycleButton, IconBuilder, IteratingButton, MenuHolder,
    RedirectButton, ToggleButton,
)
from ui.host import MenuHost


def build_about(host: MenuHost) -> MenuHolder:
    about = MenuHolder(host, rows=1, title="About")
    about.set_button(4, IteratingButton(
        IconBuilder("paper").name("Clicked 0 times").build(), 0, lambda n: n + 1,
        update_icon=lambda b, ctx, ev, ok: b.icon.with_name(f"Clicked {b.current_state} times"),
    ))
    about.set_button(8, CloseButton())
    return about


def build_settings(host: MenuHost) -> MenuHolder:
    settings = MenuHolder(host, rows=3, title="Settings")

    settings.set_button(10, ToggleButton(
        IconBuilder("lime_dye").name("Sound: on").build(),
        IconBuilder("gray_dye").name("Sound: off").build(),
        enabled=True,
        after_toggle=lambda b, ctx, ev: print(f"[DEMO] sound {'on' if b.enabled else 'off'}"),
    ))

    speeds = [IconBuilder("feather").name(f"Speed x{n}").amount(n).build() for n in (1, 2, 4)]
    settings.set_button(12, CycleButton(
        speeds,
        # Shift-click is locked: refuse the toggle, keep the icon
        before_toggle=lambda b, ctx, ev: not ev.click.is_shift,
    ))

    settings.set_button(14, RedirectButton(
        IconBuilder("arrow").name("About").lore("Open the about page").build(),
        lambda: build_about(host),
    ))
    settings.set_button(26, CloseButton("barrier", "Quit"))
    return settings


def main():
    tuning.load()
    app = App(title="Menus", width=960, height=640)
    host = MenuHost("demo")
    host.open_menu(build_settings(host))
    app.run(host)


if __name__ == "__main__":
    main()
