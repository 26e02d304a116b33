#!/usr/bin/env python3
import argparse
import logging
import sys

from errors import BFError
from interpreter import INSTRUCTIONS, Interpreter, Source
from log import Colors, setup_logging
from tape import DEFAULT_CAPACITY

logger = logging.getLogger("bf.debugger")


class Debugger:
    def __init__(self, interp, window=8):
        self.interp = interp
        self.window = window
        self.breakpoints = set()
        self.echoed = 0
        self.finished = False
        self.error = None

    def echo_output(self):
        out = self.interp.output_bytes()
        if len(out) > self.echoed:
            text = out[self.echoed:].decode("latin-1")
            print(f"{Colors.GREEN}out: {text!r}{Colors.ENDC}")
            self.echoed = len(out)

    def run_step(self):
        """Execute one instruction. Returns False when the program is over."""
        if self.finished:
            return False
        try:
            more = self.interp.step()
        except BFError as e:
            print(f"{Colors.FAIL}{e}{Colors.ENDC}")
            self.error = e
            self.finished = True
            return False
        self.echo_output()
        if not more:
            self.finished = True
        return more

    def continue_run(self):
        while self.run_step():
            if self.interp.position in self.breakpoints:
                print(f"Breakpoint hit at {self.interp.position}")
                return True
        return False

    def toggle_breakpoint(self, offset):
        if offset in self.breakpoints:
            self.breakpoints.remove(offset)
            print(f"Breakpoint removed at {offset}")
        else:
            self.breakpoints.add(offset)
            print(f"Breakpoint set at {offset}")

    def print_memory(self, addr, count):
        cells = self.interp.tape.cells
        print("Memory Dump:")
        for i in range(max(0, addr), min(len(cells), addr + count)):
            print(f"[{i:04}]: {cells[i]}")

    def print_state(self):
        interp = self.interp
        tape = interp.tape
        print(f"\n{Colors.BOLD}--- Step {interp.steps} ---{Colors.ENDC}")
        print(f"Pos: {interp.position} / {len(interp.source)}")
        print(f"Ptr: {tape.pointer}")
        print(f"Loop depth: {interp.loop_depth}")

        start = max(0, tape.pointer - self.window)
        end = min(tape.capacity, tape.pointer + self.window + 1)
        tape_str = ""
        for i in range(start, end):
            val = f"{tape.cells[i]:03}"
            if i == tape.pointer:
                tape_str += f"{Colors.REVERSE}[{val}]{Colors.ENDC} "
            else:
                tape_str += f" {val}  "
        print(f"Loc: {tape_str}")

        # next few instructions, comments left out
        code = interp.source.code
        shown = 0
        for i in range(interp.position, len(code)):
            if code[i] not in INSTRUCTIONS:
                continue
            marker = "->" if shown == 0 else "  "
            line = f"{marker} {i:04}: {code[i]}"
            print(f"{Colors.GREEN}{line}{Colors.ENDC}" if shown == 0 else line)
            shown += 1
            if shown > 2:
                break

    def run(self):
        print("BF Debugger started. Commands: (s)tep, (c)ontinue, (b)reak <pos>, (m)em dump, (q)uit, enter to repeat last")
        last_cmd = 's'
        while not self.finished:
            self.print_state()
            try:
                cmd = input(f"{Colors.CYAN}(bf-dbg){Colors.ENDC} ").strip()
            except EOFError:
                break

            if cmd == '':
                cmd = last_cmd
            last_cmd = cmd

            if cmd.startswith('s'):
                self.run_step()
            elif cmd.startswith('c'):
                self.continue_run()
            elif cmd.startswith('q'):
                break
            elif cmd.startswith('m'):
                try:
                    parts = cmd.split()
                    addr = int(parts[1]) if len(parts) > 1 else self.interp.tape.pointer
                    count = int(parts[2]) if len(parts) > 2 else 20
                except ValueError:
                    print("Usage: m [addr] [count]")
                    continue
                self.print_memory(addr, count)
            elif cmd.startswith('b'):
                try:
                    self.toggle_breakpoint(int(cmd.split()[1]))
                except (ValueError, IndexError):
                    print("Usage: b <pos>")

        print("Execution finished.")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="bf-debug", description="step through a brainfuck program.")
    parser.add_argument("filename")
    parser.add_argument("-m", "--memory", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        interp = Interpreter(Source.from_path(args.filename), memory_size=args.memory)
    except BFError as e:
        logger.error("%s", e)
        return 1

    dbg = Debugger(interp)
    dbg.run()
    return 1 if dbg.error else 0


if __name__ == '__main__':
    sys.exit(main())
