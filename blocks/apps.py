from django.apps import AppConfig


class BlocksConfig(AppConfig):
    name = "blocks"

    def ready(self):
        """Connect settings signal handlers when app is ready."""
        import blocks.signals  # noqa: F401 - Reset cached site on settings changes
