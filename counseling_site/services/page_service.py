"""
File: page_service.py
Purpose: Service Layer for page assembly. Each method sequences the sections of one page.
"""
from counseling_site.components.basic_sections import (
    SITE_NAME, AboutSection, BasicFooterSection, BasicHeaderSection,
    BasicNavSection, ContactFormSection, WelcomeSection,
)
from counseling_site.components.counseling_sections import (
    BenefitsSection, CtaSection, FooterSection, HeroSection,
    NavigationSection, PhilosophySection,
)
from counseling_site.models.entities.page import HeadLink, Page, StyleSheet

HOME_TITLE = 'Becky Forbes Counseling - Find Strength, Healing, and Hope'

FONT_LINKS = (
    HeadLink('preconnect', 'https://fonts.googleapis.com'),
    HeadLink('preconnect', 'https://fonts.gstatic.com', crossorigin=''),
    HeadLink('stylesheet', 'https://fonts.googleapis.com/css2?family=Open+Sans:wght@300;400;600;700&display=swap'),
    HeadLink('stylesheet', 'https://fonts.googleapis.com/css2?family=Charm:wght@400;700&display=swap'),
)

BASIC_CSS = """
body { font-family: Arial, Helvetica, sans-serif; margin: 0; color: #333; background: #f7f7f7; }
nav { background: #2c3e50; }
nav .menu { list-style: none; margin: 0; padding: 0 20px; display: flex; gap: 20px; }
nav .menu a { display: block; padding: 14px 0; color: #ecf0f1; text-decoration: none; }
nav .menu a.active, nav .menu a:hover { color: #1abc9c; }
header { background: #fff; padding: 40px 20px; text-align: center; }
header .tagline { color: #777; }
main { max-width: 800px; margin: 30px auto; padding: 0 20px; }
.button, button { background: #1abc9c; color: #fff; border: none; padding: 10px 18px; border-radius: 4px; text-decoration: none; }
.form-group { margin-bottom: 15px; }
.form-group label { display: block; margin-bottom: 5px; }
.form-group input, .form-group textarea { width: 100%; padding: 8px; box-sizing: border-box; }
footer { text-align: center; padding: 20px; color: #777; }
"""


class CounselingPageService:
    """
    Page assembly for the counseling practice site.
    The stylesheet is loaded once by the caller and shared by every request.
    """
    def __init__(self, stylesheet):
        self.stylesheet = stylesheet

    def generate_home_page(self):
        """Navigation, hero, philosophy, benefits, call to action, footer."""
        page = Page(
            title=HOME_TITLE,
            stylesheet=self.stylesheet,
            head_links=FONT_LINKS,
            sections=(
                NavigationSection(),
                HeroSection(),
                PhilosophySection(),
                BenefitsSection(),
                CtaSection(),
                FooterSection(),
            ),
        )
        return page.render()


class BasicPageService:
    """Page assembly for the basic home/about/contact site."""
    def __init__(self, stylesheet=None):
        self.stylesheet = stylesheet or StyleSheet('basic', BASIC_CSS)

    def _page(self, title, active_href, heading, body, tagline=None):
        return Page(
            title=title,
            stylesheet=self.stylesheet,
            sections=(
                BasicNavSection(active_href),
                BasicHeaderSection(heading, tagline),
                body,
                BasicFooterSection(),
            ),
        )

    def generate_home_page(self):
        return self._page(f'Welcome - {SITE_NAME}', '/', f'Welcome to {SITE_NAME}', WelcomeSection(),
                          tagline='A few simple pages, built fresh on every request').render()

    def generate_about_page(self):
        return self._page(f'About - {SITE_NAME}', '/about', 'About', AboutSection()).render()

    def generate_contact_page(self):
        return self._page(f'Contact - {SITE_NAME}', '/contact', 'Contact', ContactFormSection()).render()
