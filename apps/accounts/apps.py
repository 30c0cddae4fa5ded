from django.apps import AppConfig


class AccountsConfig(AppConfig):
    name = 'apps.accounts'
    label = 'accounts'
    verbose_name = 'Student accounts'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from django.conf import settings
        from .services.login_resolution import DirectoryConfig

        # Credentials are resolved once here and passed into the resolvers
        self.directory_config = DirectoryConfig.from_settings(settings)
