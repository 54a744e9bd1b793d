from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'

    def ready(self):
        from django.conf import settings
        from libraries.sdncal.tab_islamic_date import TabIslamicDate

        TabIslamicDate.islamic_offset = getattr(settings, 'TAB_ISLAMIC_DAY_OFFSET', 0)
