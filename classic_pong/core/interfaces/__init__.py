"""
Protocols implemented by the host collaborators of the core
"""

from classic_pong.core.interfaces.input import InputSource
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSource", "RendererProtocol"]
