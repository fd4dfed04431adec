"""Configuration data structures for the form demos."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AppConfig:
    """Static configuration options used across the demos."""

    app_name: str = "FormDemos"
    app_version: str = "1.0"
    max_text_length: int = 1_000
    min_image_size: int = 50
    qr_charset: str = "utf-8"
    qr_error_correction: str = "M"
    qr_scale: int = 4
    qr_border: int = 4
    log_level: str = "INFO"
    log_file: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Return a configuration with logging options taken from the environment."""

        config = cls()
        config.log_level = os.getenv("FORM_DEMOS_LOG_LEVEL", config.log_level).upper()
        config.log_file = os.getenv("FORM_DEMOS_LOG_FILE") or config.log_file
        config.debug = os.getenv("FORM_DEMOS_DEBUG", "false").lower() in ("1", "true", "yes")
        return config


@dataclass(slots=True)
class StyleConfig:
    """Simple grouping of UI styling constants."""

    bg_primary: str = "#2E3440"
    bg_secondary: str = "#3B4252"
    fg_primary: str = "#D8DEE9"
    fg_secondary: str = "#ECEFF4"
    accent_primary: str = "#88C0D0"
    accent_secondary: str = "#5E81AC"
    border: str = "#4C566A"
    font_family: str = "Segoe UI, sans-serif"
    font_size: int = 14

    def stylesheet(self) -> str:
        """Return the Qt stylesheet shared by every demo window."""

        return f"""
            QMainWindow {{ background: {self.bg_primary}; }}
            QWidget {{ color: {self.fg_primary}; font-family: {self.font_family}; font-size: {self.font_size}px; }}
            QGroupBox {{ font-weight: bold; border: 1px solid {self.border}; border-radius: 8px; margin-top: 1ex; padding: 15px; background: {self.bg_secondary}; }}
            QLineEdit, QTextEdit, QListWidget {{ background: {self.bg_primary}; color: {self.fg_secondary}; border: 1px solid {self.border}; border-radius: 4px; padding: 8px; }}
            QLineEdit:focus, QTextEdit:focus {{ border: 1px solid {self.accent_primary}; }}
            QPushButton {{ background: {self.accent_secondary}; color: {self.fg_secondary}; border: none; padding: 10px 16px; border-radius: 4px; font-weight: bold; }}
            QPushButton#AccentButton {{ background: {self.accent_primary}; color: {self.bg_primary}; }}
            QPushButton:hover {{ background: #81A1C1; }}
            #qrDisplayLabel {{ border: 2px dashed {self.border}; background: {self.bg_primary}; border-radius: 4px; }}
            """


__all__ = ["AppConfig", "StyleConfig"]
