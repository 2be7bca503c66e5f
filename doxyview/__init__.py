"""Resolution and linking engine turning parsed Doxygen compounds into a view model."""
