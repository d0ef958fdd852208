"""
Module: importing

Purpose:
    Upstream collaborators that turn documents into question text. Every
    importer hands question text to quiz_toolkit.formatting rather than
    reindenting it itself.

Key Modules:
    - text_blocks: Numbered question / lettered option text parser
    - pdf_text: PDF text layer extraction
    - spreadsheet: One question per .xlsx row

Dependencies:
    - fitz (PyMuPDF): Text extraction from PDFs
    - openpyxl: Workbook reading
"""

from .text_blocks import parse_question_blocks

__all__ = ["parse_question_blocks"]
