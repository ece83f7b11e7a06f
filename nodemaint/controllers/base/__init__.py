"""Base controller classes."""

from nodemaint.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
