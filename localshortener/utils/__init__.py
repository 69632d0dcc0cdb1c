from localshortener.utils.config import app_env, project_root, load_config
from localshortener.utils.helpers import get_short_url, extract_shortcode, is_utf8_encodable
from localshortener.utils.shortener import generate_shortcode, generate_unique_shortcode
from localshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'generate_unique_shortcode',
    'app_env',
    'project_root',
    'load_config',
    'get_short_url',
    'extract_shortcode',
    'is_utf8_encodable',
    'initialize_logging',
]
