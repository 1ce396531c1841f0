"""Version metadata for MovieRental."""

__app_name__ = "Movie Rental System"
__company__ = "MovieRental"
__version__ = "1.0.0"
