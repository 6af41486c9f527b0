import subprocess
import sys

def run_tests():
    subprocess.run(["pytest"], check=True)

def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", "src", "tests"], check=True)

def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)

def run_format():
    subprocess.run(["black", "src", "tests"], check=True)

def run_coverage():
    subprocess.run(["pytest", "--cov=addtree", "tests/", "--cov-report=xml"], check=True)

def run_doctests():
    subprocess.run(["pytest", "--doctest-modules", "src"], check=True)

def run_check():
    run_lint()
    run_typecheck()
    run_tests()
    run_doctests()

def run_plan():
    # Preview the add plan for the given paths in the current checkout
    subprocess.run(["addtree", "-v", "-f", "tree", *(sys.argv[2:] or ["."])], check=True)

if __name__ == "__main__":
    globals()[sys.argv[1]]()
