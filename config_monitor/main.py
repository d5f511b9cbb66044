"""Entry point: delegates to CLI app (one module per mode: serve, resolve)."""

from rich.traceback import install

from config_monitor.cli import app


def run() -> None:
    install(show_locals=False, max_frames=5, word_wrap=True)
    app()


if __name__ == "__main__":
    run()
