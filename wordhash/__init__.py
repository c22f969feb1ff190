"""String hashing, a Mersenne Twister, an open-addressing hash table and a Boggle solver."""

__version__ = "0.1.0"
__all__ = ["boggle", "hashtable", "mt19937", "strhash"]