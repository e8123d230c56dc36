from .base import GameClient
from .scripted import ScriptedClient
from .terminal import TerminalGameClient, render_changelog
from .auto import AutoPlayClient

__all__ = ["GameClient", "ScriptedClient", "TerminalGameClient", "render_changelog",
           "AutoPlayClient"]
