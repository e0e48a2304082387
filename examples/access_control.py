"""Private state read through properties and changed through methods."""

from playkit import User


def main() -> None:
    learner = User(name="Taylor")
    for section in ("closures", "structs", "closures"):
        if not learner.learn(section):
            print(f"Already learned {section}")
    print(f"{learner.name} learned {learner.learned_count} sections: {sorted(learner.learned)}")


if __name__ == "__main__":
    main()
