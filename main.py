"""Main entry point for the timeline project."""

from timeline.main import main

if __name__ == "__main__":
    main()
