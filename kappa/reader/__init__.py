from kappa.reader.reader import Reader, NO_VALUE, read_source

__all__ = ["Reader", "NO_VALUE", "read_source"]
