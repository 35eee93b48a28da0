from .qif_loader import load_transactions, open_reader

__all__ = ["load_transactions", "open_reader"]
