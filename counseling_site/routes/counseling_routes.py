from pathlib import Path

from flask import Blueprint, send_from_directory

from counseling_site.routes.html_response import write_html
from counseling_site.services.page_service import CounselingPageService
from counseling_site.utils.style_loader import load_stylesheet

ASSETS_DIR = Path(__file__).resolve().parent.parent / 'assets'
CSS_DIR = ASSETS_DIR / 'css'
IMG_DIR = ASSETS_DIR / 'img'

counseling_bp = Blueprint('counseling', __name__)

# Loaded once, shared by every request
page_service = CounselingPageService(load_stylesheet('home'))


# --- Home Page ---
@counseling_bp.route('/')
def home():
    return write_html('home', page_service.generate_home_page)


# --- Static Assets ---
@counseling_bp.route('/css/<path:filename>')
def css(filename):
    return send_from_directory(CSS_DIR, filename)


@counseling_bp.route('/img/<path:filename>')
def img(filename):
    return send_from_directory(IMG_DIR, filename)
