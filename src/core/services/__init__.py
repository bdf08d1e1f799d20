"""Servicios del Core: render, resumen y pipeline de exportación."""
