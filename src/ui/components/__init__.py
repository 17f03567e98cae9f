"""Reusable UI components."""
from src.ui.components.helpers import avatar_color, product_image_src, status_badge
from src.ui.components.product_list import product_list
from src.ui.components.product_panel import product_panel

__all__ = ["product_list", "product_panel", "avatar_color", "product_image_src", "status_badge"]
