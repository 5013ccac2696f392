"""Front ends for the corpus search engine: Flask app (web) and CLI (__main__)."""
