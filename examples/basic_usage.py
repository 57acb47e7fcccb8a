"""
基本使用範例

展示名字類型、規則類型、串接策略與候選上限對輸出的影響，
以及如何使用 on_timing 回呼收集計時資訊。
"""

from phononame import BeiderMorseEncoder, NameType, PhoneticEngine, RuleType
from phononame.utils.logger import TimingContext


def demo_name_types():
    """同一個名字在不同名字類型下的編碼"""
    print("=" * 60)
    print("範例 1: 名字類型")
    print("=" * 60)

    for name_type in NameType:
        engine = PhoneticEngine(name_type, RuleType.APPROX, max_phonemes=10)
        print(f"{name_type.name:<10} Renault -> {engine.encode('Renault')}")
    print()


def demo_concatenate():
    """多詞名字的兩種串接策略"""
    print("=" * 60)
    print("範例 2: 串接策略")
    print("=" * 60)

    for concatenate in (True, False):
        engine = PhoneticEngine(NameType.GENERIC, RuleType.EXACT, concatenate)
        print(f"concatenate={concatenate!s:<5} SntJohn-Smith -> {engine.encode('SntJohn-Smith')}")
    print()


def demo_max_phonemes():
    """調低上限只會得到較大上限結果的前綴"""
    print("=" * 60)
    print("範例 3: 候選上限")
    print("=" * 60)

    for max_phonemes in (1, 3, 10):
        engine = PhoneticEngine(NameType.GENERIC, RuleType.APPROX, max_phonemes=max_phonemes)
        print(f"max_phonemes={max_phonemes:<3} Judenburg -> {engine.encode('Judenburg')}")
    print()


def demo_encoder():
    """字串編碼器介面"""
    print("=" * 60)
    print("範例 4: BeiderMorseEncoder")
    print("=" * 60)

    encoder = BeiderMorseEncoder()
    encoder.name_type = NameType.SEPHARDIC
    encoder.concatenate = False
    for name in ("d'Avila", "de Avila", "'''", None):
        print(f"{name!r:<12} -> {encoder.encode(name)!r}")
    print()


def demo_timing_with_callback():
    """使用 on_timing 回呼收集計時資訊"""
    print("=" * 60)
    print("範例 5: 使用 on_timing 回呼收集計時資訊")
    print("=" * 60)

    timing_data = []

    def collect_timing(operation: str, elapsed: float):
        timing_data.append({"operation": operation, "elapsed": elapsed})

    engine = PhoneticEngine(on_timing=collect_timing)
    for name in ("Schwarzenegger", "Kowalski", "Jean Paul Sartre"):
        with TimingContext(f"encode {name}", callback=collect_timing):
            engine.encode(name)

    print("\n收集到的計時資訊:")
    for item in timing_data:
        print(f"  {item['operation']}: {item['elapsed'] * 1000:.3f} ms")
    print()


if __name__ == "__main__":
    demo_name_types()
    demo_concatenate()
    demo_max_phonemes()
    demo_encoder()
    demo_timing_with_callback()
