"""Portfolio site: single-page profile plus a small contact-form API."""

__version__ = "1.0.0"
