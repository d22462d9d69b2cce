"""Spoken contact normalizer: dictated emails and date phrases to strict forms."""
