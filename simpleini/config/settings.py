"""Modèles de paramètres de la bibliothèque (validation Pydantic)."""

import codecs
import logging

from pydantic import BaseModel, Field, field_validator


class LoggingSettings(BaseModel):
    """Paramètres du FileLogger.

    Attributes:
        level: Nom du niveau de log standard (DEBUG, INFO, ...).
        format: Format passé à logging.Formatter.
    """

    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Niveau de log inconnu : {v!r}")
        return level


class IniSettings(BaseModel):
    """Paramètres de lecture et d'écriture des fichiers INI.

    Attributes:
        encoding: Encodage des fichiers. latin-1 par défaut, un octet
            par caractère, sans perte.
        separator: Séparateur écrit entre clé et valeur.
        section_spacing: Nombre de lignes vides entre deux sections.
        logging: Paramètres du logger.
    """

    model_config = {"extra": "forbid"}

    encoding: str = "latin-1"
    separator: str = " = "
    section_spacing: int = Field(default=1, ge=0)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("encoding")
    @classmethod
    def must_be_known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Encodage inconnu : {v!r}")
        return v

    @field_validator("separator")
    @classmethod
    def must_be_single_equal(cls, v: str) -> str:
        if v.count("=") != 1 or v.replace("=", "").strip(" "):
            raise ValueError(
                "Le séparateur doit contenir un seul '=' entouré d'espaces"
            )
        return v
