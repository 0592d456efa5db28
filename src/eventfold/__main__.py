"""Allow running Eventfold as ``python -m eventfold``."""

from eventfold import main

main()
