from datetime import datetime
from functools import wraps

DEFAULT_SETTINGS = {
    "RELATIVE_BASE": None,
    "DEFAULT_HOUR": 9,
    "DEFAULT_MINUTE": 0,
    "ENGLISH_LANGUAGES": ["en"],
    "ENABLE_ENGLISH": True,
    "ENABLE_KOREAN": True,
    "NUMERIC_DATES": True,
}

_SETTING_TYPES = {
    "RELATIVE_BASE": (datetime, type(None)),
    "DEFAULT_HOUR": int,
    "DEFAULT_MINUTE": int,
    "ENGLISH_LANGUAGES": list,
    "ENABLE_ENGLISH": bool,
    "ENABLE_KOREAN": bool,
    "NUMERIC_DATES": bool,
}

_SETTING_RANGES = {
    "DEFAULT_HOUR": (0, 23),
    "DEFAULT_MINUTE": (0, 59),
}


class SettingValidationError(ValueError):
    pass


class Settings:
    """Control the behaviour of the extractors.

    Values are exposed as upper-case attributes, e.g. ``settings.RELATIVE_BASE``.
    Instances built by :func:`apply_settings` from a user dict have
    ``_default`` set to ``False``.
    """

    _default = True

    def __init__(self, settings=None):
        values = dict(DEFAULT_SETTINGS)
        if settings:
            values.update(settings)
        for key, value in values.items():
            setattr(self, key, list(value) if isinstance(value, list) else value)

    def replace(self, mod_settings=None, **kwds):
        mod_settings = dict(mod_settings or {}, **kwds)
        for key in mod_settings:
            if key not in DEFAULT_SETTINGS:
                raise SettingValidationError('"{}" is not a valid setting'.format(key))

        values = {key: getattr(self, key) for key in DEFAULT_SETTINGS}
        values.update(mod_settings)

        new_settings = Settings(values)
        new_settings._default = False
        check_settings(new_settings)
        return new_settings

    def __repr__(self):
        return "Settings(%s)" % ", ".join(
            "%s=%r" % (key, getattr(self, key)) for key in DEFAULT_SETTINGS
        )


settings = Settings()


def check_settings(settings):
    for key, expected in _SETTING_TYPES.items():
        value = getattr(settings, key)
        # bool is a subclass of int, but True is not an hour
        if expected is int and isinstance(value, bool) or not isinstance(value, expected):
            raise SettingValidationError(
                '"{}" must be {}, not {}'.format(key, _type_name(expected), type(value).__name__)
            )

    for key, (low, high) in _SETTING_RANGES.items():
        value = getattr(settings, key)
        if not low <= value <= high:
            raise SettingValidationError(
                '"{}" must be between {} and {}, got {}'.format(key, low, high, value)
            )

    if not all(isinstance(lang, str) for lang in settings.ENGLISH_LANGUAGES):
        raise SettingValidationError('"ENGLISH_LANGUAGES" must be a list of language codes')


def _type_name(expected):
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def apply_settings(f):
    """Turn the ``settings`` keyword of ``f`` into a validated :class:`Settings`.

    ``None`` or a missing argument means the module defaults; a dict is
    merged over them.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")
        if mod_settings is None:
            kwargs["settings"] = settings
        elif isinstance(mod_settings, dict):
            kwargs["settings"] = settings.replace(mod_settings=mod_settings)
        elif not isinstance(mod_settings, Settings):
            raise TypeError("settings can only be either dict or instance of Settings class")
        return f(*args, **kwargs)

    return wrapper
