from golessons.cli import main

main(prog_name="golessons")
