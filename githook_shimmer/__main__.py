"""Allow running the demo as: python -m githook_shimmer"""

from githook_shimmer.main import main_entry

if __name__ == "__main__":
    main_entry()
