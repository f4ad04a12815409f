import sys
import unittest

USAGE = ("Usage: python -m beamstress test\n"
         "       python -m beamstress demo")


def run_tests():
    try:
        # Works when 'beamstress' is installed or run from the project root.
        from beamstress import tests
    except ImportError:
        print("Error: Could not find the tests module.")
        print("Make sure you are running the command in the project's root "
              "directory.")
        return 1

    suite = unittest.TestLoader().loadTestsFromModule(tests)
    result = unittest.TextTestRunner(verbosity=0).run(suite)
    return int(not result.wasSuccessful())


def run_demo():
    """Print the stress summary of a 50 mm x 100 mm rectangle at the
    neutral axis under N = M = T = 1000 and V = 500 (SI units)."""
    from beamstress.core.postprocessing import StressAnalysis
    from beamstress.core.preprocessing import LoadSet, RectangleDimensions

    analysis = StressAnalysis(
        'rectangle', RectangleDimensions(b=0.05, h=0.1),
        LoadSet(axial_force=1000, bending_moment=1000, torque=1000,
                shear_force=500),
        y=0.0,
    )
    print("=== Beam stress analysis: rectangle 0.05 m x 0.1 m, y = 0 m ===")
    print(analysis.summary())
    return 0


def main(argv=None):
    """Dispatch the command line; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    commands = {'test': run_tests, 'demo': run_demo}
    if len(argv) != 1 or argv[0] not in commands:
        print("Unknown command.")
        print(USAGE)
        return 2
    return commands[argv[0]]()


if __name__ == '__main__':
    sys.exit(main())
