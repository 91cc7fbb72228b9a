"""
Presenter
=========
View component that fetches the greeting once and displays it.
"""
from .view import Presenter

__all__ = ["Presenter"]
