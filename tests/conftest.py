"""Pytest config"""

import pytest

from tizen_i18n.strings_model import StringsFile


@pytest.fixture()
def strings() -> StringsFile:
    """A model with two sections and two Tizen languages"""
    model = StringsFile()
    yes = model.add_entry("General", "yes")
    yes.translations.update({"en": "Yes", "fr": "Oui"})
    yes.comment = "Shown on the confirm button"
    no = model.add_entry("General", "no")
    no.translations.update({"en": "No", "fr": "Non"})
    greeting = model.add_entry("Messages", "greeting")
    greeting.translations.update({"en": "Hello %@", "fr": "Bonjour %@"})
    model.add_language("en")
    model.add_language("fr")
    return model
