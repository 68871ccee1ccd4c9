import asyncio
from types import SimpleNamespace

import pytest
from telegram.ext import MessageHandler

import main
from config import REQUIRED_VARS
from handlers.dispatcher import CommandDispatcher


class FakeStartupBot:
    username = "welcome_test_bot"

    def __init__(self):
        self.commands = None

    async def set_my_commands(self, commands):
        self.commands = commands
        return True


def test_main_exits_when_credentials_are_missing(monkeypatch):
    for name in REQUIRED_VARS:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1


def test_build_application_has_one_sequential_text_handler(settings, clevertap):
    client, _ = clevertap()

    app = main.build_application(settings, client)

    handlers = [h for group in app.handlers.values() for h in group]
    assert len(handlers) == 1
    handler = handlers[0]
    assert isinstance(handler, MessageHandler)
    assert isinstance(handler.callback.__self__, CommandDispatcher)
    assert handler.callback.__self__.client is client
    assert app.update_processor.max_concurrent_updates == 1


def test_shutdown_hook_closes_clevertap_client(settings, clevertap):
    client, _ = clevertap()
    app = main.build_application(settings, client)

    asyncio.run(app.post_shutdown(app))

    assert client._http.is_closed


def test_startup_hook_registers_start_command():
    bot = FakeStartupBot()

    asyncio.run(main.on_startup(SimpleNamespace(bot=bot)))

    assert [c.command for c in bot.commands] == ["start"]
