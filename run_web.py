"""
ChainCalc Web Keypad Launcher
Simple script to start the web server
"""
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    print("Starting ChainCalc Web Keypad...")
    print()

    try:
        import api
    except ImportError as e:
        print(f"Error importing modules: {e}")
        print("\nMake sure you have installed the required dependencies:")
        print("  pip install -e .")
        sys.exit(1)

    try:
        api.main()
    except OSError as e:
        print(f"Error starting server: {e}")
        print("\nTroubleshooting:")
        print("1. Check if another application is using the port")
        print("2. Change WEB_PORT in config.py")
        sys.exit(1)


if __name__ == "__main__":
    main()
