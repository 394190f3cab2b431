from .checker import GrammarChecker
