#
# PROJECT: braille-canvas
# MODULE: braille_canvas/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import os
from dataclasses import dataclass

from .color import COLOR_DEPTHS, DEPTH_TRUECOLOR, DEPTH_256, DEPTH_8

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Configuration for turning a canvas into terminal text."""
    use_color: bool = True
    color_depth: str = DEPTH_TRUECOLOR

    def __post_init__(self):
        if self.color_depth not in COLOR_DEPTHS:
            raise ValueError(
                f"color_depth must be one of {COLOR_DEPTHS}, got {self.color_depth!r}")

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Guess a config from the NO_COLOR, TERM and COLORTERM environment
        variables. Nothing is asked of the terminal itself.
        """
        term = os.environ.get('TERM', '').lower()
        colorterm = os.environ.get('COLORTERM', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        # https://no-color.org: any non-empty value disables color
        no_color = bool(os.environ.get('NO_COLOR'))

        if colorterm in ('truecolor', '24bit'):
            depth = DEPTH_TRUECOLOR
        elif '256color' in term:
            depth = DEPTH_256
        else:
            depth = DEPTH_8

        config = cls(use_color=not (is_dumb or no_color), color_depth=depth)
        logger.debug("detected %s (TERM=%r COLORTERM=%r)", config, term, colorterm)
        return config
