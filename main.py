# main.py
from engine import Engine
from ui import UI
import storage


def main():
    preferences = storage.load_preferences()
    engine = Engine()
    ui = UI(engine, preferences)
    ui.run()


if __name__ == "__main__":
    main()
