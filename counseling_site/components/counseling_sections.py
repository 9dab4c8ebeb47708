"""
File: counseling_sections.py
Purpose: Body sections of the Becky Forbes Counseling home page.
"""
from counseling_site.models.entities.menu import MenuEntry

PRACTICE_NAME = 'Becky Forbes Counseling'

SERVICES_MENU = (
    MenuEntry('Individual Counseling', '/individual-counseling'),
    MenuEntry('Couples Counseling', '/couples-counseling'),
    MenuEntry('EMDR Therapy', '/emdr-therapy'),
    MenuEntry('Career Counseling', '/career-counseling'),
    MenuEntry('Anger Management Individual Counseling', '/anger-management-individual'),
    MenuEntry('Anger Management', '/anger-management'),
)

MAIN_MENU = (
    MenuEntry('Home', '/', css_class='active'),
    MenuEntry('About', '/about'),
    MenuEntry('Services', '/services', css_class='dropdown-toggle', children=SERVICES_MENU),
    MenuEntry('Fees', '/fees'),
    MenuEntry('FAQS', '/faqs'),
    MenuEntry('Contact', '/contact'),
    MenuEntry('Resources', '/resources'),
)

PHILOSOPHY_TEXT = (
    "As a therapist, I seek to empower my clients with the knowledge that they hold the key to "
    "their well-being and help them develop the skills they need to access this ability on a daily "
    "basis. My compassion, empathy, and love of people along with my own life journey is what "
    "compelled me to enter the field of counseling. My primary theoretical model is Cognitive "
    "Behavioral Therapy (CBT), combined with faith-based counseling. My counseling philosophy is "
    "from a holistic point of view addressing the mental, physical, and spiritual aspects of a "
    "person. I also believe therapy must be tailored to the individual as no two people are the "
    "same. I prefer to use a client-centered collaborative approach, focusing on individuals "
    "strengths to create positive change and personal growth."
)

# Column heading -> benefit lines
BENEFITS = (
    ('Mental Health', (
        "Self-awareness- Therapy can help you understand your thoughts, emotions, and behaviors, "
        "and how they may be affecting your life.",
        "Self-esteem- Therapy can help you feel more confident and accept yourself, even if you "
        "have negative thoughts about yourself.",
        "Stress management- Therapy can teach you effective ways to manage stress, which can "
        "improve your sleep, reduce blood pressure, and strengthen your immune system.",
        "Trauma- Therapy can help you make sense of past trauma and overcome fears.",
    )),
    ('Physical Health', (
        "Boost immune system- Therapy can improve your overall health. People with mental health "
        "issues such as anxiety and depression often have compromised immune systems. Seeking help "
        "for your mental health can help you live a healthier and longer life.",
        "Pain relief- Therapy can help reduce pain.",
        "Improved sleep- Therapy can help you sleep better and is proven to be helpful with those "
        "suffering from insomnia.",
        "Reduced risk of heart disease- Therapy can help reduce mental exhaustion, which can reduce "
        "stress throughout your body and potentially reduce the risk of heart disease.",
    )),
    ('Interpersonal Relationships/Life Changes', (
        "Stronger relationships- Therapy can help improve relationships by providing individuals "
        "with the tools to communicate more effectively, set healthy boundaries, and work through "
        "conflicts.",
        "Communication skills- Therapy can help you identify communication issues and develop "
        "skills to articulate your needs, listen actively, set healthy boundaries, and resolve "
        "conflicts.",
        "Life transitions- Therapy can help you adapt to life transitions, such as moving out, "
        "getting married, divorce/ending a relationship, job/career changes, death/loss.",
    )),
)

CONTACT_LINES = (
    '✉ counseling@beckyrhoten.com',
    '☎ 817-123-4567',
    '☎ 817-890-1234',
)

SOCIAL_LINKS = ('Instagram', 'LinkedIn')


# --- Navigation ---
class NavigationSection:
    """Top bar: logo plus the main menu, with Services as a dropdown."""
    def __init__(self, menu=MAIN_MENU):
        self.menu = menu

    def render(self, b):
        with b.tag('nav'):
            with b.tag('div', class_='nav-container'):
                with b.tag('div', class_='logo'):
                    b.open('img', src='/logo.png', alt=PRACTICE_NAME)
                with b.tag('div', class_='nav-menu'):
                    for entry in self.menu:
                        if entry.is_dropdown:
                            self._render_dropdown(b, entry)
                        else:
                            b.element('a', entry.label, href=entry.href, class_=entry.css_class)

    def _render_dropdown(self, b, entry):
        with b.tag('div', class_='dropdown'):
            with b.tag('a', href=entry.href, class_=entry.css_class):
                b.text(f'{entry.label} ')
                b.element('span', '▾')
            with b.tag('div', class_='dropdown-content'):
                for child in entry.children:
                    b.element('a', child.label, href=child.href, class_=child.css_class)


# --- Hero ---
class HeroSection:
    def render(self, b):
        with b.tag('div', class_='hero-section'):
            with b.tag('div', class_='hero-content'):
                b.element('h1', 'Find Strength, Healing, and Hope')
                b.element('p', PRACTICE_NAME)
                b.element('a', 'Get In Touch', href='/contact', class_='btn btn-primary')


# --- Philosophy ---
class PhilosophySection:
    def render(self, b):
        with b.tag('section', class_='philosophy-section'):
            with b.tag('div', class_='container'):
                with b.tag('div', class_='philosophy-content'):
                    with b.tag('div', class_='philosophy-image'):
                        b.open('img', src='/img/becky_portrait.jpeg', alt='Becky Forbes')
                    with b.tag('div', class_='philosophy-text'):
                        b.element('h2', "Becky's Counseling Philosophy")
                        b.element('p', PHILOSOPHY_TEXT)


# --- Benefits ---
class BenefitsSection:
    """Three columns of checkmarked benefit lines."""
    def __init__(self, columns=BENEFITS):
        self.columns = columns

    def render(self, b):
        with b.tag('section', class_='benefits-section'):
            with b.tag('div', class_='container'):
                b.element('h2', 'Benefits of Therapy')
                with b.tag('div', class_='benefits-grid'):
                    for heading, items in self.columns:
                        with b.tag('div', class_='benefit-column'):
                            b.element('h3', heading)
                            for item in items:
                                with b.tag('div', class_='benefit-item'):
                                    b.element('span', '✓', class_='checkmark')
                                    b.element('p', item)


# --- Call To Action ---
class CtaSection:
    def render(self, b):
        with b.tag('section', class_='cta-section'):
            with b.tag('div', class_='container'):
                b.element('h2', 'Start your journey today')
                b.element('h3', f'with {PRACTICE_NAME}')
                b.element('a', 'Schedule Now', href='/contact', class_='btn btn-secondary')


# --- Footer ---
class FooterSection:
    def render(self, b):
        with b.tag('footer'):
            with b.tag('div', class_='footer-content'):
                with b.tag('div', class_='footer-section'):
                    for line in CONTACT_LINES:
                        b.element('p', line)
                with b.tag('div', class_='footer-section'):
                    with b.tag('div', class_='social-links'):
                        for name in SOCIAL_LINKS:
                            b.element('a', name, href='#', class_='social-link')
                with b.tag('div', class_='footer-section'):
                    b.open('img', src='/footer-logo.png', alt=PRACTICE_NAME, class_='footer-logo')
            with b.tag('div', class_='footer-bottom'):
                with b.tag('div', class_='container'):
                    b.element('p', f'Copyright © 2025 {PRACTICE_NAME}. All rights reserved.')
                    with b.tag('div', class_='footer-links'):
                        b.element('a', 'Privacy Policy', href='/privacy')
                        b.text(' | ')
                        b.element('a', 'Terms & Conditions', href='/terms')
