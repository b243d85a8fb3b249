class BookCoversConfig:
    """Default configuration for the Book Covers module."""
    CLOUDINARY_CDN_HOST = 'cloudinary-a.akamaihd.net'
    BOOK_COVERS_STATIC_PATH = 'wp-content/plugins/book-exchange/app/images/book-covers'
    # Empty means the host of the current request is used
    SITE_URL = ''

    @classmethod
    def apply_defaults(cls, app):
        """Fill in module settings the app config does not define."""
        for key in ('CLOUDINARY_CDN_HOST', 'BOOK_COVERS_STATIC_PATH', 'SITE_URL'):
            if not app.config.get(key):
                app.config[key] = getattr(cls, key)
