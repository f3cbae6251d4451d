"""METAR/SPECI decoding, see :func:`parser`."""

from pyaerodrome.decoder.metar import METARDecoder, parser  # noqa

__all__ = ["METARDecoder", "parser"]
