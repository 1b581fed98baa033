"""Open-addressing hash table, seeded string hash, Mersenne Twister and a straight-line Boggle solver."""

__version__ = "0.1.0"
__all__ = ["boggle", "hashtable", "mt19937", "strhash"]