"""Adaptadores de infraestructura: lectura de catálogos y exportadores."""
