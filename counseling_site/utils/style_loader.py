"""
File: style_loader.py
Purpose: Loads the page stylesheets that ship next to the code.
"""
import logging
from pathlib import Path

from counseling_site.models.entities.page import StyleSheet

logger = logging.getLogger(__name__)

STYLES_DIR = Path(__file__).resolve().parent.parent / 'styles'


def load_stylesheet(name, styles_dir=STYLES_DIR):
    """Reads `<name>.css` once. Called at import time, so a missing file fails startup."""
    path = Path(styles_dir) / f'{name}.css'
    css = path.read_text(encoding='utf-8')
    logger.debug("Loaded stylesheet %s (%d bytes)", path.name, len(css))
    return StyleSheet(name, css)
