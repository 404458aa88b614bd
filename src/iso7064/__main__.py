from .cli import app


def main() -> None:
    app(prog_name="iso7064")


if __name__ == "__main__":
    main()
