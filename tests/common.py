class Console:
    """Scripted replacement for input and print."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def ask(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError()
        return self.lines.pop(0)

    def say(self, text=""):
        self.output.extend(str(text).split("\n"))

    def guess_prompts(self):
        return [p for p in self.prompts if p.startswith("Enter your guess")]
