"""Probe drivers that read out values of kernel header symbols."""

from ._driver_protocol import ProbeDriverProtocol
from .compiler import CompilerProbeDriver
from .static import StaticProbeDriver

__all__ = [
    "CompilerProbeDriver",
    "ProbeDriverProtocol",
    "StaticProbeDriver",
]
