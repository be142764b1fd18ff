"""Unit tests for FusionTranslator.

This package contains test modules for all components of the FusionTranslator application.
Tests use pytest with asyncio support and replace HTTP/network calls with stubs via monkeypatch.
"""
