"""
File: basic_sections.py
Purpose: Sections of the basic three-page site (home, about, contact).
"""
from counseling_site.models.entities.menu import MenuEntry

SITE_NAME = 'My Basic Website'

BASIC_MENU = (
    MenuEntry('Home', '/'),
    MenuEntry('About', '/about'),
    MenuEntry('Contact', '/contact'),
)


# --- Navigation ---
class BasicNavSection:
    def __init__(self, active_href='/', menu=BASIC_MENU):
        self.active_href = active_href
        self.menu = menu

    def render(self, b):
        with b.tag('nav'):
            with b.tag('ul', class_='menu'):
                for entry in self.menu:
                    css_class = 'active' if entry.href == self.active_href else None
                    with b.tag('li'):
                        b.element('a', entry.label, href=entry.href, class_=css_class)


# --- Header ---
class BasicHeaderSection:
    def __init__(self, heading, tagline=None):
        self.heading = heading
        self.tagline = tagline

    def render(self, b):
        with b.tag('header'):
            b.element('h1', self.heading)
            if self.tagline:
                b.element('p', self.tagline, class_='tagline')


# --- Welcome ---
class WelcomeSection:
    def render(self, b):
        with b.tag('main'):
            with b.tag('section', class_='welcome'):
                b.element('h2', 'Hello and welcome!')
                b.element('p', 'This is a simple website served straight from Python. '
                               'Every page is put together from small sections on each request.')
                b.element('a', 'Learn more about us', href='/about', class_='button')


# --- About ---
class AboutSection:
    def render(self, b):
        with b.tag('main'):
            with b.tag('section', class_='about'):
                b.element('h2', 'About Us')
                b.element('p', 'We are a small counseling practice that believes in meeting '
                               'people where they are.')
                b.element('p', 'Our approach is client-centered and collaborative, built on '
                               'compassion, empathy and respect.')


# --- Contact Form ---
class ContactFormSection:
    """Renders the contact form. Submissions are not handled by this site."""
    def render(self, b):
        with b.tag('main'):
            with b.tag('section', class_='contact'):
                b.element('h2', 'Contact Us')
                with b.tag('form', action='/contact', method='post'):
                    self._field(b, 'name', 'Name', 'text')
                    self._field(b, 'email', 'Email', 'email')
                    with b.tag('div', class_='form-group'):
                        b.element('label', 'Message', for_='message')
                        b.element('textarea', '', id='message', name='message', rows=5, required=True)
                    b.element('button', 'Send', type='submit')

    def _field(self, b, name, label, input_type):
        with b.tag('div', class_='form-group'):
            b.element('label', label, for_=name)
            b.open('input', type=input_type, id=name, name=name, required=True)


# --- Footer ---
class BasicFooterSection:
    def render(self, b):
        with b.tag('footer'):
            b.element('p', f'© 2025 {SITE_NAME}')
