# --- MenuEntry Entity ---
class MenuEntry:
    def __init__(self, label, href, css_class=None, children=()):
        self.label = label
        self.href = href
        self.css_class = css_class
        self.children = tuple(children)  # non-empty -> rendered as a dropdown

    @property
    def is_dropdown(self):
        return bool(self.children)
