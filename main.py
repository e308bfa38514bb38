from comicglass.container import container
from comicglass.exceptions import BaseAppError


def main():
    import sys

    # Usage: python main.py [path]
    # Prints one directory of the library, relative to COMICGLASS_LIBRARY_ROOT.
    path = " ".join(sys.argv[1:]) if len(sys.argv) > 1 else ""

    uc = container.get_browse_directory_use_case()
    try:
        res = uc.execute(path)
    except BaseAppError as exc:
        print("Error:", exc)
        return 1

    print(f"Listing {res.label}:")
    for e in res.entries:
        print(e)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
