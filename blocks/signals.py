from django.core.signals import setting_changed
from django.dispatch import receiver

from .site import reset_default_site

SITE_SETTINGS = {"SITE_CONVERTERS", "SITE_CONVERTER_OPTIONS"}


@receiver(setting_changed)
def reset_site_on_setting_change(sender, setting, **kwargs):
    if setting in SITE_SETTINGS:
        reset_default_site()
