from wphelpers.file.random_filename import RandomFilename, is_random_filename

__all__ = ["RandomFilename", "is_random_filename"]
