"""Go syntax model for errauditor."""
