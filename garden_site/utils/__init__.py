"""Cross-cutting helpers"""
