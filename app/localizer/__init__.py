"""Localizer - resolves i18n key tokens into language-specific strings.

Packages:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Registry, template engine and resolution facade
"""
