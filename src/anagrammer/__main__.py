"""Allow running the anagram finder with `python -m anagrammer`."""

from anagrammer import main

main()
