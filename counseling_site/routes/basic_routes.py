from flask import Blueprint

from counseling_site.routes.html_response import write_html
from counseling_site.services.page_service import BasicPageService

basic_bp = Blueprint('basic', __name__)

page_service = BasicPageService()


# --- Home Page ---
@basic_bp.route('/')
def home():
    return write_html('home', page_service.generate_home_page)


# --- About ---
@basic_bp.route('/about')
def about():
    return write_html('about', page_service.generate_about_page)


# --- Contact ---
# The form is rendered only; nothing handles its POST.
@basic_bp.route('/contact')
def contact():
    return write_html('contact', page_service.generate_contact_page)
