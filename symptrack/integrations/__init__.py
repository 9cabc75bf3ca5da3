"""SympTrack — Зовнішні довідкові сервіси"""
from .clients import HospitalLocator, DrugLabelClient

__all__ = [
    "HospitalLocator",
    "DrugLabelClient",
]
